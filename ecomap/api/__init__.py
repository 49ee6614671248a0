from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecomap.api.endpoints import get_endpoints_router
from ecomap.graph import GraphCompiler, LayoutThresholds
from ecomap.stores.base import EcosystemStore


def create_app(
    *,
    store: EcosystemStore,
    compiler: GraphCompiler | None = None,
) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    compiler = compiler or GraphCompiler(thresholds=LayoutThresholds.from_settings())
    app.include_router(router=get_endpoints_router(store=store, compiler=compiler))

    return app
