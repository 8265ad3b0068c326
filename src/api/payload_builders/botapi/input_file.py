"""InputFile — payload binário para upload via multipart.

Fontes suportadas:
    - bytes: sempre reabrível
    - caminho no filesystem: reaberto a cada tentativa
    - stream binário: reabrível apenas se seekable (volta à posição inicial)

A posse do stream passa ao SDK quando o InputFile entra no pipeline:
o stream é fechado por `close()` ao fim da chamada, com sucesso ou falha.
"""

from __future__ import annotations

import io
import mimetypes
from contextlib import contextmanager
from pathlib import Path
from typing import IO, TYPE_CHECKING

from utils.errors import AttachmentError

if TYPE_CHECKING:
    from collections.abc import Iterator


class InputFile:
    """Arquivo a enviar para a API.

    Attributes:
        name: Nome explícito do anexo/arquivo (opcional)
        mime_hint: Content-Type sugerido (opcional)
    """

    __slots__ = ("_closed", "_consumed", "_content", "_path", "_start", "_stream", "mime_hint", "name")

    def __init__(
        self,
        source: bytes | str | Path | IO[bytes],
        name: str | None = None,
        mime_hint: str | None = None,
    ) -> None:
        self.name = name
        self.mime_hint = mime_hint
        self._content: bytes | None = None
        self._path: Path | None = None
        self._stream: IO[bytes] | None = None
        self._start = 0
        self._consumed = False
        self._closed = False

        if isinstance(source, (bytes, bytearray)):
            self._content = bytes(source)
        elif isinstance(source, (str, Path)):
            self._path = Path(source)
            if self.name is None:
                self.name = self._path.name
        elif hasattr(source, "read"):
            self._stream = source
            if _is_seekable(source):
                self._start = source.tell()
            if self.name is None:
                stream_name = getattr(source, "name", None)
                if isinstance(stream_name, str) and stream_name:
                    self.name = Path(stream_name).name
        else:
            raise TypeError(f"Fonte de InputFile não suportada: {type(source).__name__}")

    @classmethod
    def from_path(cls, path: str | Path, name: str | None = None, mime_hint: str | None = None) -> InputFile:
        """Cria InputFile a partir de um caminho (validando existência)."""
        resolved = Path(path)
        if not resolved.is_file():
            raise AttachmentError(f"Arquivo não encontrado: {resolved.name}", name=name or resolved.name)
        return cls(resolved, name=name, mime_hint=mime_hint)

    @property
    def is_reopenable(self) -> bool:
        """True se o conteúdo pode ser lido novamente (retry seguro)."""
        if self._stream is None:
            return True
        return not self._closed and _is_seekable(self._stream)

    @property
    def content_type(self) -> str:
        """Content-Type do part multipart."""
        if self.mime_hint:
            return self.mime_hint
        guessed, _ = mimetypes.guess_type(self.name or "")
        return guessed or "application/octet-stream"

    @contextmanager
    def open(self) -> Iterator[IO[bytes]]:
        """Abre o conteúdo para uma tentativa de envio.

        Raises:
            AttachmentError: Se a fonte não pode ser aberta ou já foi consumida
        """
        if self._closed:
            raise AttachmentError("InputFile já foi fechado", name=self.name)

        if self._content is not None:
            with io.BytesIO(self._content) as buffer:
                yield buffer
            return

        if self._path is not None:
            try:
                handle = self._path.open("rb")
            except OSError as exc:
                raise AttachmentError(f"Falha ao abrir arquivo: {exc.strerror}", name=self.name) from exc
            with handle:
                yield handle
            return

        stream = self._stream
        if stream is None:
            raise AttachmentError("InputFile sem fonte", name=self.name)
        if self._consumed:
            if not _is_seekable(stream):
                raise AttachmentError("Stream não reabrível já consumido", name=self.name)
            try:
                stream.seek(self._start)
            except OSError as exc:
                raise AttachmentError("Falha ao reposicionar stream", name=self.name) from exc
        self._consumed = True
        # O stream pertence ao InputFile: fechado apenas em close()
        yield stream

    def close(self) -> None:
        """Libera o stream do chamador. Idempotente."""
        if self._closed:
            return
        self._closed = True
        if self._stream is not None:
            self._stream.close()

    def __repr__(self) -> str:
        return f"InputFile(name={self.name!r}, mime_hint={self.mime_hint!r})"


def _is_seekable(stream: IO[bytes]) -> bool:
    seekable = getattr(stream, "seekable", None)
    if seekable is None:
        return False
    try:
        return bool(seekable())
    except (OSError, ValueError):
        return False
