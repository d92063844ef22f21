"""Decide which slice of the document is sent to the model for an edit request."""
from shared.schemas import OperationContext, ensure_context

from editcore.chunking.budget import content_char_budget, validate_content_size
from editcore.chunking.truncation import truncate
from editcore.config import EditCoreSettings
from editcore.schemas import EditTarget, Selection, TargetMode
from editcore.selection.reconciler import revalidate_selection
from editcore.structure.extractor import extract_sections


def plan_edit_target(
    document: str,
    request: str,
    *,
    selection: Selection | None = None,
    section_indices: list[int] | None = None,
    model: str | None = None,
    settings: EditCoreSettings | None = None,
    ctx: OperationContext | None = None,
) -> EditTarget:
    """Resolve the editing target: selection, then sections, then whole document.

    The result always satisfies ``document[char_start:char_end] == text``, also
    after truncation, so the rewritten text can be spliced back in place.
    """
    settings = settings or EditCoreSettings()
    ctx = ensure_context(ctx)
    log = ctx.logger("planner")
    model = model or settings.default_model

    mode: TargetMode = "document"
    start, end = 0, len(document)
    indices: list[int] = []

    if selection is not None and selection.text.strip():
        current = revalidate_selection(document, selection, ctx=ctx)
        if current is None:
            log.warning(
                "selection_unusable_fallback_to_document",
                start=selection.start,
                end=selection.end,
            )
        else:
            mode = "selection"
            start, end = current.start, current.end
    elif section_indices and len(document) > settings.smart_context_min_chars:
        extraction = extract_sections(document, section_indices, ctx=ctx)
        if extraction.sections:
            mode = "sections"
            start, end = extraction.char_start, extraction.char_end
            indices = sorted(set(section_indices))

    text = document[start:end]
    budget = content_char_budget(
        model, settings.system_prompt_overhead_tokens, settings.chars_per_token
    )
    size = validate_content_size(text, model, settings.chars_per_token)
    truncated = False
    if not size.valid or len(text) > budget:
        result = truncate(
            text,
            budget,
            query=request or None,
            header_bonus=settings.ranker_header_bonus,
            min_term_length=settings.ranker_min_term_length,
            ctx=ctx,
        )
        if result.truncated:
            truncated = True
            start, end = start + result.char_start, start + result.char_end
            text = result.text

    log.info(
        "edit_target_planned",
        mode=mode,
        char_start=start,
        char_end=end,
        truncated=truncated,
        document_length=len(document),
    )
    return EditTarget(
        text=text,
        char_start=start,
        char_end=end,
        mode=mode,
        truncated=truncated,
        original_length=len(document),
        section_indices=indices,
    )
