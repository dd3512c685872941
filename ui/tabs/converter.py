import logging
import streamlit as st
from config import (
    PAGE_SIZE_LABELS, ORIENTATIONS, DEFAULT_PAGE_SIZE, DEFAULT_ORIENTATION,
    DEFAULT_MARGIN_MM, DEFAULT_QUALITY, MIN_QUALITY, DEFAULT_OUTPUT_NAME,
)
from core.layout import max_margin, clamp_margin
from core.pdf_ops import PageConfig, OutputMode, convert
from core.utils import output_filename
from ui.components import render_download_button, render_pdf_preview

logger = logging.getLogger(__name__)

ACTIONS = {
    OutputMode.SAVE: "⬇️ Baixar PDF",
    OutputMode.PREVIEW: "👁️ Pré-visualizar",
}

def render():
    st.header("📄 Gerar PDF")
    queue = st.session_state.get('image_queue', [])

    c1, c2 = st.columns(2)
    size = c1.radio("Tamanho da página", list(PAGE_SIZE_LABELS), index=list(PAGE_SIZE_LABELS).index(DEFAULT_PAGE_SIZE),
                    format_func=PAGE_SIZE_LABELS.get, horizontal=True, key="conv_size")
    orientation = c2.radio("Orientação", list(ORIENTATIONS), index=list(ORIENTATIONS).index(DEFAULT_ORIENTATION),
                           format_func=ORIENTATIONS.get, horizontal=True, key="conv_orientation")

    c3, c4 = st.columns(2)
    margin_cap = max_margin(size, orientation)
    # A margem anterior sobrevive à troca de formato; só é cortada se não couber mais
    prev_margin = clamp_margin(st.session_state.get("conv_margin", DEFAULT_MARGIN_MM), size, orientation)
    margin = c3.slider("Margem (mm)", 0.0, margin_cap, prev_margin, step=1.0, key="conv_margin",
                       help="Distância mínima entre a imagem e cada borda da página. 0 = página inteira.")
    quality = c4.slider("Qualidade da imagem", MIN_QUALITY, 1.0, DEFAULT_QUALITY, step=0.01, key="conv_quality",
                        help="1.0 mantém o arquivo original; valores menores recomprimem em JPEG.")

    c5, c6 = st.columns(2)
    name = c5.text_input("Nome do Arquivo", value=DEFAULT_OUTPUT_NAME, key="conv_name")
    pwd = c6.text_input("Senha (opcional)", type="password", key="conv_pwd")

    c7, c8 = st.columns(2)
    opt = c7.checkbox("Otimizar PDF final", value=True, key="conv_opt")
    mode = c8.radio("Ação", list(ACTIONS), format_func=ACTIONS.get, horizontal=True, key="conv_mode")

    if st.button("Converter para PDF", type="primary", key="conv_btn"):
        if not queue:
            st.warning("Adicione pelo menos uma imagem antes de converter.")
            return

        config = PageConfig(size=size, orientation=orientation, margin=margin, quality=quality)
        filename = output_filename(name, DEFAULT_OUTPUT_NAME)
        try:
            with st.spinner("Convertendo e unindo..."):
                pdf_bytes = convert(list(queue), config, optimize=opt, password=pwd or None)
        except Exception as e:
            logger.exception("Conversão falhou")
            st.error(f"Erro na conversão: {e}")
            return

        if mode == OutputMode.PREVIEW:
            render_pdf_preview(pdf_bytes, password=pwd or None)
        render_download_button(pdf_bytes, filename, "Baixar PDF Convertido", key="conv_download")
