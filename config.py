import os
import fitz  # PyMuPDF

# --- Constantes Visuais ---
DEFAULT_BRAND = {
    "name": "Conversor de Imagens",
    "primary": "#0F3D73",
    "secondary": "#1E5AA7",
    "accent": "#2E7DFF",
    "bg_light": "#E9F2FB",
    "bg_dark": "#0B0F14",
    "text_dark": "#0B0F14",
    "text_light": "#F8FAFC",
    "logo_url": "",
    "subtitle": "Junte fotos e digitalizações em um único PDF",
}

# --- Constantes do Sistema ---
LOG_LEVEL = os.environ.get("IMG2PDF_LOG_LEVEL", "INFO").upper()

# Miniaturas da galeria (px) e resolução da pré-visualização do PDF
THUMBNAIL_SIZE = (240, 240)
PREVIEW_DPI = 48

# Fallbacks de encriptação/permissões (PyMuPDF)
ENCRYPT_AES_256 = getattr(fitz, "ENCRYPT_AES_256", getattr(fitz, "PDF_ENCRYPT_AES_256", 0))
PERM_PRINT      = getattr(fitz, "PERM_PRINT",      getattr(fitz, "PDF_PERM_PRINT",      0))
PERM_COPY       = getattr(fitz, "PERM_COPY",       getattr(fitz, "PDF_PERM_COPY",       0))
PERM_ANNOTATE   = getattr(fitz, "PERM_ANNOTATE",   getattr(fitz, "PDF_PERM_ANNOTATE",   0))

# --- Formatos de Entrada ---
ACCEPTED_MEDIA_TYPES = {
    "image/png",
    "image/jpeg",
    "image/webp",
    "image/gif",
    "image/bmp",
}
UPLOAD_EXTENSIONS = ["png", "jpg", "jpeg", "webp", "gif", "bmp"]

# --- Páginas (mm, retrato: lado menor primeiro) ---
PAGE_SIZES_MM = {
    "a3": (297.0, 420.0),
    "a4": (210.0, 297.0),
    "a5": (148.0, 210.0),
    "letter": (215.9, 279.4),
    "legal": (215.9, 355.6),
}
PAGE_SIZE_LABELS = {
    "a3": "A3",
    "a4": "A4",
    "a5": "A5",
    "letter": "Carta (Letter)",
    "legal": "Ofício (Legal)",
}
ORIENTATIONS = {
    "portrait": "Retrato",
    "landscape": "Paisagem",
}

# --- Padrões da Conversão ---
DEFAULT_PAGE_SIZE = "a4"
DEFAULT_ORIENTATION = "portrait"
DEFAULT_MARGIN_MM = 10.0
DEFAULT_QUALITY = 0.92
MIN_QUALITY = 0.1
DEFAULT_OUTPUT_NAME = "imagens-convertidas"
