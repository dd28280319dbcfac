"""Variable template API routes.

Catalog browsing, rendering with bindings, and the stateless variable
helpers used while authoring templates.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from docfill.api.deps import get_template_catalog
from docfill.api.schemas import (
    PromoteRequest,
    PromoteResponse,
    RenderRequest,
    RenderResponse,
    SubstituteRequest,
    TemplateListResponse,
    VariablesRequest,
    VariablesResponse,
)
from docfill.strategies.template_engine import (
    TemplateCatalog,
    VariableTemplate,
    extract_variables,
    promote_to_variable,
    substitute,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListResponse)
async def list_templates(
    catalog: TemplateCatalog = Depends(get_template_catalog),
) -> TemplateListResponse:
    templates = catalog.list_templates()
    return TemplateListResponse(templates=templates, total=len(templates))


@router.post("/variables", response_model=VariablesResponse)
async def list_variables(request: VariablesRequest) -> VariablesResponse:
    """Return the distinct variable names in ``content``."""
    return VariablesResponse(variables=extract_variables(request.content))


@router.post("/substitute", response_model=RenderResponse)
async def substitute_variables(request: SubstituteRequest) -> RenderResponse:
    """Substitute bindings into arbitrary content.

    Unbound variables stay in the output verbatim and are listed in
    ``unbound``.
    """
    content = substitute(request.content, request.bindings)
    return RenderResponse(content=content, unbound=extract_variables(content))


@router.post("/promote", response_model=PromoteResponse)
async def promote_selection(request: PromoteRequest) -> PromoteResponse:
    """Replace the first occurrence of a selection with a variable token."""
    try:
        content = promote_to_variable(request.content, request.selection, request.name)
    except ValueError as e:
        logger.warning(f"Rejected variable promotion: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    return PromoteResponse(content=content, variables=extract_variables(content))


@router.get("/{template_id}", response_model=VariableTemplate)
async def get_template(
    template_id: str,
    catalog: TemplateCatalog = Depends(get_template_catalog),
) -> VariableTemplate:
    return catalog.get(template_id)


@router.post("/{template_id}/render", response_model=RenderResponse)
async def render_template(
    template_id: str,
    request: RenderRequest,
    catalog: TemplateCatalog = Depends(get_template_catalog),
) -> RenderResponse:
    """Render a catalog template with the given bindings."""
    content = catalog.render(template_id, request.bindings)
    return RenderResponse(content=content, unbound=extract_variables(content))
