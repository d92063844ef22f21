"""Editing session: the document snapshot, its history, selection and pending proposal."""
from shared.schemas import OperationContext, ensure_context

from editcore.config import EditCoreSettings
from editcore.diffing.line_diff import diff_stats, generate_contextual_diff, generate_diff
from editcore.editing.proposal import build_proposal, parse_model_reply
from editcore.errors import NoPendingProposalError, StaleSelectionError
from editcore.planner import plan_edit_target
from editcore.schemas import (
    DiffLine,
    DiffStats,
    EditProposal,
    EditTarget,
    ModelReply,
    SectionSummary,
    Selection,
)
from editcore.selection.decoration import is_raw_text_document, is_windowed
from editcore.selection.reconciler import reconcile_selection, revalidate_selection
from editcore.selection.viewport import WindowedView
from editcore.structure.parser import parse_structure
from editcore.structure.summary import section_summaries, structure_summary


class EditSession:
    """Single source of truth for one document being edited.

    Selections and proposals are derived views: a new selection replaces the
    old one, and accepting a proposal clears both.
    """

    def __init__(
        self,
        document: str,
        settings: EditCoreSettings | None = None,
        ctx: OperationContext | None = None,
        file_name: str | None = None,
    ) -> None:
        self.file_name = file_name
        self._settings = settings or EditCoreSettings()
        self._ctx = ensure_context(ctx)
        self._log = self._ctx.logger("session")
        self._history: list[str] = [document]
        self._index = 0
        self._selection: Selection | None = None
        self._proposal: EditProposal | None = None

    @property
    def document(self) -> str:
        return self._history[self._index]

    @property
    def selection(self) -> Selection | None:
        return self._selection

    @property
    def proposal(self) -> EditProposal | None:
        return self._proposal

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._history) - 1

    @property
    def windowed(self) -> bool:
        return is_windowed(self.document, self.file_name, self._settings.windowed_min_chars)

    def view(self, window_start: int = 0) -> WindowedView:
        """A line window over the current document, sized from settings."""
        return WindowedView(
            self.document,
            window_size=self._settings.view_window_size,
            scroll_step=self._settings.view_scroll_step,
            window_start=window_start,
        )

    def select(self, raw_text: str, decorated: bool | None = None) -> Selection | None:
        """Replace the current selection; None when it cannot be located.

        Line-number prefixes are stripped when *decorated*, which defaults to
        whether the document is shown raw (always with line numbers).
        """
        if decorated is None:
            decorated = is_raw_text_document(self.document, self.file_name)
        self._selection = reconcile_selection(
            self.document, raw_text, decorated=decorated, ctx=self._ctx
        )
        return self._selection

    def clear_selection(self) -> None:
        self._selection = None

    def sections(self) -> list[SectionSummary]:
        return section_summaries(parse_structure(self.document))

    def outline(self) -> str:
        """Numbered section list used when asking which sections to edit."""
        return structure_summary(parse_structure(self.document))

    def plan(
        self,
        request: str,
        section_indices: list[int] | None = None,
        model: str | None = None,
    ) -> EditTarget:
        return plan_edit_target(
            self.document,
            request,
            selection=self._selection,
            section_indices=section_indices,
            model=model,
            settings=self._settings,
            ctx=self._ctx,
        )

    def propose(
        self,
        reply: str,
        target: EditTarget,
        strict: bool = False,
    ) -> ModelReply:
        """Parse a model reply and, if it carries an edit, stage a proposal.

        The target is re-checked against the current document first, since the
        document may have changed while the model was answering. With *strict*,
        a target that can no longer be found raises StaleSelectionError instead
        of being dropped.
        """
        parsed = parse_model_reply(reply)
        if parsed.edit is None:
            return parsed
        current = revalidate_selection(
            self.document,
            Selection(start=target.char_start, end=target.char_end, text=target.text),
            ctx=self._ctx,
        )
        if current is None:
            if strict:
                raise StaleSelectionError("Edit target no longer present in the document")
            self._log.warning("proposal_dropped_stale_target", char_start=target.char_start)
            return parsed
        target = target.model_copy(update={"char_start": current.start, "char_end": current.end})
        self._proposal = build_proposal(self.document, target, parsed.edit)
        return parsed

    def accept(self) -> str:
        if self._proposal is None:
            raise NoPendingProposalError("No proposal to accept")
        self._history = self._history[: self._index + 1] + [self._proposal.modified]
        self._index = len(self._history) - 1
        self._proposal = None
        self._selection = None
        self._log.info("proposal_accepted", history_length=len(self._history))
        return self.document

    def discard(self) -> None:
        if self._proposal is None:
            raise NoPendingProposalError("No proposal to discard")
        self._proposal = None

    def undo(self) -> str:
        if self.can_undo:
            self._index -= 1
            self._selection = None
        return self.document

    def redo(self) -> str:
        if self.can_redo:
            self._index += 1
            self._selection = None
        return self.document

    def diff(
        self, full: bool = False, context_lines: int | None = None
    ) -> tuple[list[DiffLine], DiffStats]:
        """Diff of the pending proposal; contextual unless *full*."""
        if self._proposal is None:
            raise NoPendingProposalError("No proposal to diff")
        if full:
            lines = generate_diff(self._proposal.original, self._proposal.modified)
        else:
            if context_lines is None:
                context_lines = self._settings.diff_context_lines
            lines = generate_contextual_diff(
                self._proposal.original, self._proposal.modified, context_lines
            )
        return lines, diff_stats(lines)
