import io
import logging
import mimetypes
from dataclasses import dataclass
from typing import Any, Iterable, List, Set, Tuple

from PIL import Image, ImageOps

from config import ACCEPTED_MEDIA_TYPES, THUMBNAIL_SIZE

logger = logging.getLogger(__name__)

# Formatos que o PyMuPDF embute diretamente, sem reprocessar
PASSTHROUGH_TYPES = {"image/png", "image/jpeg"}
EXIF_ORIENTATION = 0x0112


class InvalidImageError(ValueError):
    """Arquivo não decodificável ou com dimensão zero."""


@dataclass
class ImageEntry:
    key: str
    name: str
    media_type: str
    data: bytes
    width: int
    height: int
    thumbnail: bytes
    transposed: bool = False

    @property
    def size_label(self) -> str:
        return f"{self.width}×{self.height} px"


def file_key(f: Any) -> str:
    if hasattr(f, "file_id"): return f.file_id
    if hasattr(f, "id"): return f.id
    return f"{getattr(f, 'name', 'arquivo')}-{getattr(f, 'size', 0)}"


def media_type_of(f: Any) -> str:
    """Tipo MIME informado pelo upload; na falta, deduz pela extensão."""
    mt = getattr(f, "type", None) or mimetypes.guess_type(getattr(f, "name", ""))[0]
    return (mt or "").lower()


def is_accepted(media_type: str) -> bool:
    return (media_type or "").lower() in ACCEPTED_MEDIA_TYPES


def _make_thumbnail(img: Image.Image) -> bytes:
    thumb = img.copy()
    if thumb.mode not in ("RGB", "RGBA", "L", "LA", "P"):
        thumb = thumb.convert("RGB")
    thumb.thumbnail(THUMBNAIL_SIZE)
    buf = io.BytesIO()
    thumb.save(buf, format="PNG")
    return buf.getvalue()


def decode_image(name: str, data: bytes, media_type: str, key: str = "") -> ImageEntry:
    """
    Decodifica os bytes com o Pillow e monta a entrada da galeria.
    As dimensões naturais já consideram a orientação EXIF (fotos de celular).
    """
    try:
        with Image.open(io.BytesIO(data)) as src:
            src.load()
            transposed = src.getexif().get(EXIF_ORIENTATION, 1) not in (None, 1)
            img = ImageOps.exif_transpose(src) if transposed else src
            width, height = img.size
            thumbnail = _make_thumbnail(img)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise InvalidImageError(f"Não foi possível ler '{name}': {e}") from e

    if width <= 0 or height <= 0:
        raise InvalidImageError(f"'{name}' tem dimensão zero.")

    return ImageEntry(
        key=key or f"{name}-{len(data)}",
        name=name,
        media_type=media_type,
        data=data,
        width=width,
        height=height,
        thumbnail=thumbnail,
        transposed=transposed,
    )


def collect_images(files: Iterable[Any], seen_keys: Set[str]) -> Tuple[List[ImageEntry], List[str]]:
    """
    Processa uploads novos (objetos com name/type/getvalue()).
    Tipos fora da lista são ignorados em silêncio; arquivos já vistos também.
    Retorna (entradas aceitas, nomes que falharam na decodificação).
    """
    entries: List[ImageEntry] = []
    rejected: List[str] = []

    for f in files:
        key = file_key(f)
        if key in seen_keys:
            continue
        seen_keys.add(key)

        media_type = media_type_of(f)
        if not is_accepted(media_type):
            logger.debug("Ignorando %s (%s)", getattr(f, "name", key), media_type)
            continue

        data = f.getvalue() if hasattr(f, "getvalue") else f.read()
        try:
            entries.append(decode_image(f.name, data, media_type, key=key))
        except InvalidImageError as e:
            logger.warning("%s", e)
            rejected.append(f.name)

    return entries, rejected


def encode_for_pdf(entry: ImageEntry, quality: float = 1.0) -> bytes:
    """
    Bytes da imagem prontos para page.insert_image.
    quality >= 1 mantém o arquivo original sempre que possível;
    abaixo disso a imagem é recodificada em JPEG (alfa achatado em branco).
    """
    if quality >= 1.0 and entry.media_type in PASSTHROUGH_TYPES and not entry.transposed:
        return entry.data

    with Image.open(io.BytesIO(entry.data)) as src:
        img = ImageOps.exif_transpose(src)
        buf = io.BytesIO()
        if quality >= 1.0:
            if img.mode not in ("RGB", "RGBA", "L", "LA"):
                img = img.convert("RGBA")
            img.save(buf, format="PNG")
        else:
            if img.mode in ("RGBA", "LA", "P"):
                rgba = img.convert("RGBA")
                flat = Image.new("RGB", rgba.size, (255, 255, 255))
                flat.paste(rgba, mask=rgba.split()[-1])
                img = flat
            elif img.mode != "RGB":
                img = img.convert("RGB")
            img.save(buf, format="JPEG", quality=max(1, min(95, round(quality * 100))))
        return buf.getvalue()
