import math
from typing import NamedTuple, Tuple
from config import PAGE_SIZES_MM, ORIENTATIONS

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0


def mm_to_pt(value: float) -> float:
    """Converte milímetros em pontos PDF (1/72 pol)."""
    return value * POINTS_PER_INCH / MM_PER_INCH


class Placement(NamedTuple):
    """Retângulo onde a imagem é desenhada, na mesma unidade da página (mm)."""
    x: float
    y: float
    width: float
    height: float

    def to_points(self) -> Tuple[float, float, float, float]:
        """Retorna (x0, y0, x1, y1) em pontos, no formato esperado por fitz.Rect."""
        x0, y0 = mm_to_pt(self.x), mm_to_pt(self.y)
        return x0, y0, x0 + mm_to_pt(self.width), y0 + mm_to_pt(self.height)


def page_dimensions(size: str, orientation: str) -> Tuple[float, float]:
    """Largura e altura (mm) do formato nomeado na orientação pedida."""
    try:
        short, long = PAGE_SIZES_MM[size.lower()]
    except KeyError:
        raise ValueError(f"Formato de página desconhecido: {size!r}")
    if orientation not in ORIENTATIONS:
        raise ValueError(f"Orientação inválida: {orientation!r}")
    if orientation == "landscape":
        return long, short
    return short, long


def validate_margin(page_w: float, page_h: float, margin: float) -> None:
    """Margem precisa ficar em 0 <= m < min(W, H) / 2."""
    if margin < 0:
        raise ValueError("A margem não pode ser negativa.")
    if margin >= min(page_w, page_h) / 2:
        raise ValueError(
            f"Margem de {margin:g} mm não deixa área útil numa página de {page_w:g} x {page_h:g} mm."
        )


def max_margin(size: str, orientation: str) -> float:
    """Maior margem (mm, inteira) oferecida na interface para o formato."""
    w, h = page_dimensions(size, orientation)
    half = min(w, h) / 2
    # estritamente menor que metade do lado menor
    return float(math.ceil(half) - 1)


def fit_and_center(page_w: float, page_h: float, margin: float,
                   img_w: float, img_h: float) -> Placement:
    """
    Encaixa a imagem na área útil da página (descontadas as margens),
    preservando a proporção, e centraliza.

    A imagem sempre encosta na margem do eixo que a limita. Em caso de
    proporções iguais, usa o ramo "ajustar pela altura" (resultado idêntico).
    """
    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"Dimensões de imagem inválidas: {img_w} x {img_h}")

    avail_w = page_w - 2 * margin
    avail_h = page_h - 2 * margin

    page_ratio = avail_w / avail_h
    img_ratio = img_w / img_h

    if img_ratio > page_ratio:
        # Mais larga que a área útil: ajusta pela largura
        w = avail_w
        h = avail_w / img_ratio
    else:
        h = avail_h
        w = avail_h * img_ratio

    x = margin + (avail_w - w) / 2
    y = margin + (avail_h - h) / 2
    return Placement(x, y, w, h)


def clamp_margin(margin: float, size: str, orientation: str) -> float:
    """Mantém a margem escolhida ao trocar de formato, limitando-a ao máximo do novo formato."""
    return min(max(float(margin), 0.0), max_margin(size, orientation))
