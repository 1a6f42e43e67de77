"""Preview endpoints: extract a generated draft without starting a review."""

import logging

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.models.preview import (
    PreviewRequest,
    PreviewResult,
    SectionReplaceRequest,
    SectionReplaceResponse,
)
from app.services.extractor import build_preview
from app.services.normalizer import make_frontmatter
from app.services.sections import extract_sections, replace_section

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(tags=["Preview"])


@router.post(
    "/preview",
    response_model=PreviewResult,
    summary="Extract a structured draft from generated text",
    description=(
        "Pulls the title, summary, SEO fields, tags, image placeholders and "
        "video embeds out of an AI-generated draft.  Extraction is "
        "best-effort: unrecognised structure yields empty fields, never an "
        "error.\n\n"
        "Pass `?format=markdown` to download the draft as a Markdown file "
        "with YAML frontmatter."
    ),
)
@limiter.limit(settings.preview_rate_limit)
async def preview(
    request: Request,
    body: PreviewRequest,
    format: str = Query(default="json", description="Output format: 'json' or 'markdown'."),
) -> PreviewResult | PlainTextResponse:
    logger.info("Preview request received", extra={"content_chars": len(body.content)})

    result = build_preview(body.content)

    if format == "markdown":
        return _build_markdown_response(result)

    return result


@router.post(
    "/sections/replace",
    response_model=SectionReplaceResponse,
    summary="Replace one heading-delimited section of a draft",
)
@limiter.limit(settings.preview_rate_limit)
async def replace_draft_section(request: Request, body: SectionReplaceRequest) -> SectionReplaceResponse:
    sections = {section.id: section for section in extract_sections(body.content)}
    section = sections.get(body.section_id)
    if section is None:
        logger.warning("Unknown section %s", body.section_id)
        raise HTTPException(status_code=404, detail=f"No section '{body.section_id}' in content.")

    content = replace_section(body.content, section, body.new_content)
    return SectionReplaceResponse(content=content, sections=extract_sections(content))


def _build_markdown_response(result: PreviewResult) -> PlainTextResponse:
    """Return the draft as ``<slug>.md``: frontmatter followed by the body."""
    frontmatter = make_frontmatter(result.document, result.slug)
    body = result.document.body
    markdown = f"{frontmatter}\n\n{body}\n" if body else f"{frontmatter}\n"
    return PlainTextResponse(
        markdown,
        media_type="text/markdown",
        headers={"Content-Disposition": f'attachment; filename="{result.slug}.md"'},
    )
