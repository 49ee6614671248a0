from tests.fakes.fake_store import FailingSaveEcosystemStore, FakeEcosystemStore

__all__ = ["FakeEcosystemStore", "FailingSaveEcosystemStore"]
