import fitz
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Any, Dict, Sequence

from config import (
    DEFAULT_PAGE_SIZE, DEFAULT_ORIENTATION, DEFAULT_MARGIN_MM, DEFAULT_QUALITY, MIN_QUALITY,
)
from core.images import ImageEntry, encode_for_pdf
from core.layout import Placement, fit_and_center, page_dimensions, validate_margin, mm_to_pt

logger = logging.getLogger(__name__)


class ConversionError(RuntimeError):
    """Falha na geração do PDF; nenhum arquivo parcial é produzido."""


class NoImagesError(ConversionError):
    pass


class OutputMode(str, Enum):
    SAVE = "save"
    PREVIEW = "preview"


@dataclass(frozen=True)
class PageConfig:
    """Configuração escolhida para uma conversão (medidas em mm)."""
    size: str = DEFAULT_PAGE_SIZE
    orientation: str = DEFAULT_ORIENTATION
    margin: float = DEFAULT_MARGIN_MM
    quality: float = DEFAULT_QUALITY

    @property
    def dimensions(self):
        return page_dimensions(self.size, self.orientation)

    def validate(self) -> None:
        w, h = self.dimensions
        validate_margin(w, h, self.margin)
        if not MIN_QUALITY <= self.quality <= 1.0:
            raise ValueError(f"Qualidade deve estar entre {MIN_QUALITY} e 1.0 (recebido {self.quality}).")

    def place(self, entry: ImageEntry) -> Placement:
        w, h = self.dimensions
        return fit_and_center(w, h, self.margin, entry.width, entry.height)


def optimize_pdf(doc: fitz.Document, options: Optional[Dict[str, Any]] = None) -> bytes:
    """Salva o documento com opções de otimização."""
    if options is None: options = {}

    # Defaults de otimização
    save_opts: Dict[str, Any] = dict(garbage=4, deflate=True, clean=True)
    save_opts.update(options)

    return doc.tobytes(**save_opts)


def security_options(password: Optional[str]) -> Dict[str, Any]:
    """Opções de tobytes() para proteger o PDF com senha (AES-256)."""
    if not password:
        return {}
    from config import ENCRYPT_AES_256, PERM_PRINT, PERM_COPY, PERM_ANNOTATE
    return {
        "encryption": ENCRYPT_AES_256,
        "user_pw": password,
        "owner_pw": password,
        "permissions": PERM_PRINT | PERM_COPY | PERM_ANNOTATE,
    }


def images_to_pdf(entries: Sequence[ImageEntry], config: PageConfig = PageConfig(),
                  optimize: bool = True, password: Optional[str] = None) -> bytes:
    """
    Gera um PDF com uma imagem por página, na ordem recebida.
    Cada imagem é encaixada e centralizada dentro das margens (ver core.layout).
    """
    if not entries:
        raise NoImagesError("Nenhuma imagem para converter.")
    config.validate()

    page_w, page_h = config.dimensions
    doc = fitz.open()
    try:
        for idx, entry in enumerate(entries):
            placement = config.place(entry)
            page = doc.new_page(width=mm_to_pt(page_w), height=mm_to_pt(page_h))
            try:
                page.insert_image(fitz.Rect(*placement.to_points()),
                                  stream=encode_for_pdf(entry, config.quality))
            except Exception as e:
                raise ConversionError(f"Falha ao inserir '{entry.name}' (página {idx + 1}): {e}") from e
            logger.debug("Página %d: %s em %s", idx + 1, entry.name, placement)

        opts: Dict[str, Any] = {"deflate_images": optimize, "deflate_fonts": optimize}
        opts.update(security_options(password))
        out = optimize_pdf(doc, opts)
    finally:
        doc.close()

    logger.info("PDF gerado: %d página(s), %d bytes (%s/%s, margem %g mm, qualidade %.2f)",
                len(entries), len(out), config.size, config.orientation, config.margin, config.quality)
    return out


def convert(entries: List[ImageEntry], config: PageConfig, optimize: bool = True,
            password: Optional[str] = None) -> bytes:
    """Conversão completa, com qualquer falha reportada como ConversionError."""
    try:
        return images_to_pdf(entries, config, optimize=optimize, password=password)
    except ConversionError:
        raise
    except Exception as e:
        raise ConversionError(f"Falha ao gerar o PDF: {e}") from e
