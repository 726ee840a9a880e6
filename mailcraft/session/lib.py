"""Editor session state.

An EditorSession owns the authoritative template source and everything the
editor keys by component index: expanded panels, hidden components and the
selection. The source text is the single source of truth; the parsed
document is derived from it and kept in sync by every edit.
"""

import logging
from collections.abc import Mapping

from ..config import EnvVar, get_environment, get_history_debounce
from ..document import (
    IndexRemap,
    ParsedTemplate,
    TemplateParseError,
    add_component,
    delete_component,
    duplicate_component,
    move_component,
    parse_template,
    serialize_template,
    set_base_prop,
    set_content,
    set_frontmatter,
    set_prop,
    starter_template,
)
from ..history import DebouncedRecorder, EditHistory
from ..preview import (
    PreviewDocument,
    css_property_for,
    css_value_for,
    patch_base_style,
    patch_live_style,
    project_for_preview,
)
from ..schema import FormSection, Viewport, build_form, get_component_schema, resolve_prop

logger = logging.getLogger(__name__)


class EditorSession:
    """One open template in the editor.

    Example:
        >>> session = EditorSession()
        >>> session.add_component("copy")
        >>> session.set_prop(1, "body", "Hello")
        >>> session.undo()

    Attributes:
        source: Authoritative template text.
        document: Last successfully parsed document.
        parse_error: Error from the last raw edit, None when it parsed.
        expanded: Indices whose property panels are open.
        hidden: Indices left out of the preview.
        selected: Selected component index, if any.
        viewport: Active preview width.
        history: Undo/redo snapshots of ``source``.
        recorder: Debounces continuous edits into history snapshots.
    """

    def __init__(
        self,
        source: str | None = None,
        viewport: Viewport = Viewport.DESKTOP,
        history: EditHistory | None = None,
        recorder_window: float | None = None,
    ):
        """Open a session.

        Args:
            source: Initial template text. Defaults to the starter template.
            viewport: Initial preview width.
            history: History to record into. Defaults to a new history
                bounded by MAILCRAFT_HISTORY_LIMIT.
            recorder_window: Debounce window for continuous edits. Defaults
                to MAILCRAFT_HISTORY_DEBOUNCE_MS.

        Raises:
            TemplateParseError: If the initial source does not parse.
        """
        text = source if source is not None else starter_template()
        self.document: ParsedTemplate = parse_template(text)
        self.source = text
        self.parse_error: TemplateParseError | None = None
        self.expanded: set[int] = set()
        self.hidden: set[int] = set()
        self.selected: int | None = None
        self.viewport = viewport
        self.history = history if history is not None else EditHistory(limit=get_environment(EnvVar.HISTORY_LIMIT))
        window = recorder_window if recorder_window is not None else get_history_debounce()
        self.recorder = DebouncedRecorder(self.history, window=window)
        self.history.push(self.source)

    def __repr__(self) -> str:
        return f"EditorSession(components={len(self.document.components)}, viewport={self.viewport.value})"

    # -------------------------------------------------------------------------
    # Source sync
    # -------------------------------------------------------------------------

    def _commit(self, doc: ParsedTemplate, immediate: bool = False) -> None:
        """Adopt an edited document and re-serialize the source."""
        self.document = doc
        self.source = serialize_template(doc)
        self.parse_error = None
        if immediate:
            self.recorder.flush()
            self.history.push(self.source)
        else:
            self.recorder.record(self.source)

    def _remap(self, remap: IndexRemap, expand_copy: bool = False) -> None:
        self.expanded = remap.apply(self.expanded)
        if expand_copy and remap.inserted is not None:
            self.expanded.add(remap.inserted)
        self.hidden = remap.apply(self.hidden)
        self.selected = remap.map_index(self.selected)

    def _prune(self) -> None:
        """Drop index state that no longer addresses a component."""
        size = len(self.document.components)
        self.expanded = {i for i in self.expanded if i < size}
        self.hidden = {i for i in self.hidden if i < size}
        if self.selected is not None and self.selected >= size:
            self.selected = None

    def set_source(self, text: str) -> bool:
        """Apply a raw code edit.

        The text always becomes the source. When it does not parse, the last
        good document is kept and ``parse_error`` records why.

        Returns:
            True if the text parsed.
        """
        self.source = text
        self.recorder.record(text)
        try:
            doc = parse_template(text)
        except TemplateParseError as e:
            logger.warning(f"Keeping last good document: {e}")
            self.parse_error = e
            return False
        self.document = doc
        self.parse_error = None
        self._prune()
        return True

    # -------------------------------------------------------------------------
    # Visual edits
    # -------------------------------------------------------------------------

    def set_prop(self, index: int, key: str, value: str) -> None:
        self._commit(set_prop(self.document, index, key, value))

    def set_content(self, index: int, content: str | None) -> None:
        self._commit(set_content(self.document, index, content))

    def set_frontmatter(self, key: str, value: str | None) -> None:
        self._commit(set_frontmatter(self.document, key, value))

    def set_base_prop(self, key: str, value: str | None) -> None:
        self._commit(set_base_prop(self.document, key, value))

    def add_component(
        self,
        component_type: str,
        props: Mapping[str, str] | None = None,
        index: int | None = None,
    ) -> int:
        """Insert a component and open its panel.

        Returns:
            Index of the new component.
        """
        doc, remap = add_component(self.document, component_type, props, index)
        self._remap(remap)
        self.expanded.add(remap.inserted)
        self._commit(doc, immediate=True)
        return remap.inserted

    def delete_component(self, index: int) -> None:
        doc, remap = delete_component(self.document, index)
        self._remap(remap)
        self._commit(doc, immediate=True)

    def duplicate_component(self, index: int) -> int:
        """Duplicate a component right after itself and open the copy.

        Returns:
            Index of the copy.
        """
        doc, remap = duplicate_component(self.document, index)
        self._remap(remap, expand_copy=True)
        self._commit(doc, immediate=True)
        return remap.inserted

    def move_component(self, from_index: int, to_index: int) -> None:
        doc, remap = move_component(self.document, from_index, to_index)
        self._remap(remap)
        self._commit(doc, immediate=True)

    # -------------------------------------------------------------------------
    # View state
    # -------------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        self.document.component(index)

    def toggle_hidden(self, index: int) -> bool:
        """Toggle preview visibility. Returns True if now hidden."""
        self._check_index(index)
        self.hidden ^= {index}
        return index in self.hidden

    def toggle_expanded(self, index: int) -> bool:
        """Toggle the property panel. Returns True if now expanded."""
        self._check_index(index)
        self.expanded ^= {index}
        return index in self.expanded

    def select(self, index: int | None) -> None:
        if index is not None:
            self._check_index(index)
        self.selected = index

    def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def _restore(self, snapshot: str | None) -> bool:
        if snapshot is None:
            return False
        self.source = snapshot
        try:
            self.document = parse_template(snapshot)
            self.parse_error = None
        except TemplateParseError as e:
            # Raw edits can record unparseable snapshots
            logger.warning(f"Restored snapshot does not parse: {e}")
            self.parse_error = e
        self._prune()
        return True

    def undo(self) -> bool:
        """Restore the previous snapshot. Returns False if there is none."""
        self.recorder.flush()
        return self._restore(self.history.undo())

    def redo(self) -> bool:
        """Restore the next snapshot. Returns False if there is none."""
        self.recorder.flush()
        return self._restore(self.history.redo())

    def poll(self) -> bool:
        """Record a pending edit whose debounce window elapsed."""
        return self.recorder.poll()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def resolve(self, index: int, key: str) -> str | None:
        """Effective value of a prop at the current viewport.

        Props without a schema definition resolve to their stored value.
        """
        component = self.document.component(index)
        schema = get_component_schema(component.type)
        prop = schema.get_prop(key) if schema else None
        if prop is None:
            return component.props.get(key) or None
        return resolve_prop(component.props, prop, self.viewport)

    def form(self, index: int) -> list[FormSection]:
        """Property form for one component at the current viewport."""
        component = self.document.component(index)
        return build_form(component.type, component.props, self.viewport)

    def preview_markup(self) -> str:
        """Compiler input for the current document, honoring ``hidden``."""
        return project_for_preview(self.document, self.hidden)

    # -------------------------------------------------------------------------
    # Live styling
    # -------------------------------------------------------------------------

    def live_style(self, index: int, prop_key: str, value: str, preview: PreviewDocument | None = None) -> int:
        """Write a prop, then patch the rendered preview when possible.

        The document is always updated first. The DOM patch is skipped for
        props with no direct CSS mapping and for mobile overrides.

        Returns:
            Number of preview elements patched.
        """
        self.set_prop(index, prop_key, value)
        css_property = css_property_for(prop_key)
        if preview is None or css_property is None:
            return 0
        return patch_live_style(preview, index, css_property, css_value_for(css_property, value))

    def live_base_style(self, key: str, value: str, preview: PreviewDocument | None = None) -> int:
        """Write a base layout prop, then patch its wrapper elements."""
        self.set_base_prop(key, value)
        if preview is None:
            return 0
        return patch_base_style(preview, key, value)


__all__ = ["EditorSession"]
