import streamlit as st
import fitz
from typing import Optional
from config import PREVIEW_DPI
from ui.styles import inject_brand_css

@st.cache_resource(show_spinner="Gerando pré-visualização...")
def build_previews(pdf_bytes: bytes, dpi=PREVIEW_DPI, password: Optional[str] = None):
    """Gera imagens PNG de cada página do PDF gerado."""
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        if doc.needs_pass:
            doc.authenticate(password or "")
        return [pg.get_pixmap(matrix=fitz.Matrix(dpi/72, dpi/72)).tobytes("png") for pg in doc]

def brand_header(brand: dict, high_contrast: bool):
    """Exibe o cabeçalho personalizado."""
    inject_brand_css(brand, high_contrast)
    logo_html = f'<img src="{brand["logo_url"]}" alt="Logo" />' if brand.get("logo_url") else ""
    st.markdown(f"""
    <div class="sp-header">
      {logo_html}
      <div class="sp-hgroup">
        <div class="sp-title">{brand["name"]} <span class="sp-badge">Imagens → PDF</span></div>
        <div class="sp-subtitle">{brand.get("subtitle","")}</div>
      </div>
    </div>
    """, unsafe_allow_html=True)

def render_download_button(data: bytes, filename: str, label: str, key: Optional[str] = None):
    """Wrapper consistente para download buttons."""
    st.download_button(
        label=f"⬇️ {label}",
        data=data,
        file_name=filename,
        mime="application/pdf",
        key=key,
    )
    st.success(f"Arquivo pronto: {filename}")

def render_pdf_preview(pdf_bytes: bytes, password: Optional[str] = None, n_cols: int = 4):
    """Mostra as páginas do PDF gerado em grade, sem baixar."""
    previews = build_previews(pdf_bytes, password=password)
    st.caption(f"{len(previews)} página(s) geradas.")
    cols = st.columns(n_cols)
    for i, png in enumerate(previews):
        cols[i % n_cols].image(png, caption=f"Pág. {i+1}", width="stretch")
