import re
from unidecode import unidecode
from typing import List, Optional, TypeVar

T = TypeVar("T")

def safe_slug(text: str, maxlen: int = 60) -> str:
    """Gera um slug seguro para nomes de arquivos."""
    s = unidecode(text).strip().lower()
    s = re.sub(r"[^a-z0-9\-\_\s\.]+", "", s)
    s = re.sub(r"\s+", "_", s).strip("_")
    return (s or "arquivo")[:maxlen]

def output_filename(name: str, default: str) -> str:
    """Nome final do PDF: aplica o padrão se vazio e garante a extensão .pdf."""
    name = (name or "").strip()
    if name.lower().endswith(".pdf"):
        name = name[:-4]
    if not name.strip(" ."):
        name = default
    return f"{safe_slug(name)}.pdf"

def move_item(items: List[T], index: int, delta: int) -> None:
    """Troca o item de posição com o vizinho (delta -1 sobe, +1 desce)."""
    np = index + delta
    if 0 <= index < len(items) and 0 <= np < len(items):
        items[np], items[index] = items[index], items[np]

def move_to(items: List[T], src: int, dst: int) -> None:
    """Arrasta o item de src para a posição dst (limitada às bordas da lista)."""
    if not 0 <= src < len(items): return
    dst = max(0, min(dst, len(items) - 1))
    items.insert(dst, items.pop(src))

def remove_at(items: List[T], index: int) -> None:
    if 0 <= index < len(items):
        del items[index]

def reorder_by_labels(items: List[T], labels: List[str], new_labels: Optional[List[str]]) -> List[T]:
    """
    Reordena items conforme a lista de rótulos devolvida pelo componente de arrastar.
    labels[i] identifica items[i]; se new_labels não for uma permutação de labels,
    a ordem atual é mantida.
    """
    if not new_labels or sorted(new_labels) != sorted(labels) or len(set(labels)) != len(labels):
        return list(items)
    by_label = dict(zip(labels, items))
    return [by_label[lbl] for lbl in new_labels]
