from __future__ import annotations

import abc

from docgen.models.document import DocumentStructure


class RendererBase(abc.ABC):
    @property
    @abc.abstractmethod
    def format_name(self) -> str: ...

    @property
    @abc.abstractmethod
    def content_type(self) -> str: ...

    @property
    def aliases(self) -> tuple[str, ...]:
        return ()

    @property
    def file_extension(self) -> str:
        return self.format_name

    @abc.abstractmethod
    def render(self, doc: DocumentStructure) -> str:
        """Render the document to the target format. Must not mutate it."""
