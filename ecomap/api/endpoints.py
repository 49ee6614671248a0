from typing import Callable

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from loguru import logger

from ecomap.domain.relationships import GraphSnapshot, MutationResult
from ecomap.graph import GraphCompiler, generate_mermaid_chart
from ecomap.relationship_sets import RelationshipSetEditor, select_active_set, visible_subset
from ecomap.relationship_sets.editor import SET_NOT_FOUND_MESSAGE
from ecomap.stores.base import EcosystemStore


def _filtered_snapshot(store: EcosystemStore, set_id: int | None) -> tuple[GraphSnapshot, int]:
    """Fetch a snapshot with relationships narrowed by the active set.

    Returns the snapshot and the unfiltered relationship count.
    """
    snapshot = store.get_snapshot()
    active_set = select_active_set(store.get_relationship_sets(), set_id)

    total = len(snapshot.relationships)
    snapshot.relationships = visible_subset(snapshot.relationships, active_set)
    return snapshot, total


def _graph_headers(snapshot: GraphSnapshot, total: int) -> dict[str, str]:
    return {
        "Cache-Control": "no-cache",
        "X-Visible-Relationships": str(len(snapshot.relationships)),
        "X-Total-Relationships": str(total),
    }


def _create_dot_endpoint(store: EcosystemStore, compiler: GraphCompiler):
    """Create the DOT graph endpoint handler."""

    async def get_graph_dot(set_id: int | None = None) -> Response:
        snapshot, total = _filtered_snapshot(store, set_id)
        logger.info(
            f"Compiling graph with {len(snapshot.relationships)} of {total} relationships"
        )
        return Response(
            content=compiler.compile_snapshot(snapshot),
            media_type="text/vnd.graphviz",
            headers=_graph_headers(snapshot, total),
        )

    return get_graph_dot


def _create_mermaid_endpoint(store: EcosystemStore):
    """Create the Mermaid chart endpoint handler."""

    async def get_graph_mermaid(set_id: int | None = None) -> Response:
        snapshot, total = _filtered_snapshot(store, set_id)
        return Response(
            content=generate_mermaid_chart(snapshot.relationships, snapshot.entities),
            media_type="text/plain",
            headers=_graph_headers(snapshot, total),
        )

    return get_graph_mermaid


def _create_relationship_sets_endpoint(store: EcosystemStore):
    """Create the relationship set listing endpoint handler."""

    async def list_relationship_sets():
        return [
            {
                **relationship_set.model_dump(mode="json"),
                "whitelisted": len(relationship_set.whitelist),
                "blacklisted": len(relationship_set.blacklist),
            }
            for relationship_set in store.get_relationship_sets()
        ]

    return list_relationship_sets


def _create_mutation_endpoint(mutation: Callable[[int, int], MutationResult]):
    """Create a whitelist/blacklist mutation endpoint handler."""

    async def mutate(set_id: int, relationship_id: int) -> JSONResponse:
        result = mutation(set_id, relationship_id)
        if result.success:
            status_code = 200
        elif result.error == SET_NOT_FOUND_MESSAGE:
            status_code = 404
        else:
            status_code = 500
        return JSONResponse(status_code=status_code, content=result.model_dump())

    return mutate


def get_endpoints_router(
    *,
    store: EcosystemStore,
    compiler: GraphCompiler,
) -> APIRouter:
    router = APIRouter()
    editor = RelationshipSetEditor(store)

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.get("/api/graph/dot")(_create_dot_endpoint(store, compiler))
    router.get("/api/graph/mermaid")(_create_mermaid_endpoint(store))
    router.get("/api/relationship-sets")(_create_relationship_sets_endpoint(store))

    whitelist_path = "/api/relationship-sets/{set_id}/whitelist/{relationship_id}"
    blacklist_path = "/api/relationship-sets/{set_id}/blacklist/{relationship_id}"
    router.post(whitelist_path)(_create_mutation_endpoint(editor.add_to_whitelist))
    router.delete(whitelist_path)(_create_mutation_endpoint(editor.remove_from_whitelist))
    router.post(blacklist_path)(_create_mutation_endpoint(editor.add_to_blacklist))
    router.delete(blacklist_path)(_create_mutation_endpoint(editor.remove_from_blacklist))

    return router
