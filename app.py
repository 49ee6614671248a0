import sys

from loguru import logger

from ecomap.api import create_app
from ecomap.config import settings
from ecomap.graph import GraphCompiler, LayoutThresholds
from ecomap.stores.local import LocalEcosystemStore

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Loading ecosystem data from {settings.ecosystem_store_path}")
store = LocalEcosystemStore(settings.ecosystem_store_path)
compiler = GraphCompiler(thresholds=LayoutThresholds.from_settings())
app = create_app(store=store, compiler=compiler)
