"""
Shared PDF layout utilities for ReportLab reports.
Provides a consistent ACABOI-branded header, footer and table styling.
"""
import logging
from copy import deepcopy
from datetime import datetime
from io import BytesIO
from typing import Any, Dict, List, Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

logger = logging.getLogger(__name__)

# Verde ACABOI (166, 206, 57)
ACABOI_GREEN = colors.Color(166 / 255, 206 / 255, 57 / 255)

DEFAULT_DOC_KWARGS = {
    "pagesize": landscape(A4),
    "leftMargin": 14 * mm,
    "rightMargin": 14 * mm,
}

DEFAULT_BRANDING: Dict[str, Any] = {
    "app_name": "ACABOI",
    "report_title": "Relatório",
    "footer_text": "Documento gerado pelo ACABOI",
    "primary_color": ACABOI_GREEN,
    "text_color": colors.HexColor("#2C3E50"),
    "muted_text_color": colors.HexColor("#607D8B"),
    "header_bar_color": colors.HexColor("#E0E0E0"),
    "header_height": 22 * mm,
    "footer_height": 12 * mm,
    "show_page_number": True,
    "generated_at": None,
}


def prepare_branding(user_branding: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    branding = deepcopy(DEFAULT_BRANDING)
    if user_branding:
        for key, value in user_branding.items():
            if value is not None:
                branding[key] = value
    branding["generated_at"] = branding.get("generated_at") or datetime.now()
    return branding


def create_document(buffer: BytesIO, branding: Optional[Dict[str, Any]] = None, doc_kwargs: Optional[Dict[str, Any]] = None):
    branding_cfg = prepare_branding(branding)
    merged_kwargs = {**DEFAULT_DOC_KWARGS}
    if doc_kwargs:
        merged_kwargs.update(doc_kwargs)

    merged_kwargs.setdefault("topMargin", branding_cfg["header_height"] + 8 * mm)
    merged_kwargs.setdefault("bottomMargin", branding_cfg["footer_height"] + 6 * mm)

    doc = SimpleDocTemplate(buffer, **merged_kwargs)
    return doc, branding_cfg


def _draw_header(canvas_obj, doc, branding: Dict[str, Any]):
    width, height = doc.pagesize
    top = height - 12 * mm
    left = doc.leftMargin

    canvas_obj.saveState()
    canvas_obj.setFont("Helvetica-Bold", 15)
    canvas_obj.setFillColor(branding["text_color"])
    canvas_obj.drawString(left, top, branding["report_title"])

    canvas_obj.setFont("Helvetica", 9)
    canvas_obj.setFillColor(branding["muted_text_color"])
    generated = branding["generated_at"].strftime("%d/%m/%Y")
    canvas_obj.drawString(left, top - 12, f"Gerado em: {generated}")

    canvas_obj.setFont("Helvetica-Bold", 12)
    canvas_obj.setFillColor(branding["primary_color"])
    canvas_obj.drawRightString(width - doc.rightMargin, top, branding["app_name"])

    # Linha de separação
    canvas_obj.setFillColor(branding["header_bar_color"])
    canvas_obj.rect(left, height - branding["header_height"], width - left - doc.rightMargin, 1.0, stroke=0, fill=1)
    canvas_obj.restoreState()


def _draw_footer(canvas_obj, doc, branding: Dict[str, Any]):
    width, _ = doc.pagesize
    y = branding["footer_height"] / 2

    canvas_obj.saveState()
    canvas_obj.setFont("Helvetica", 8)
    canvas_obj.setFillColor(branding["muted_text_color"])
    canvas_obj.drawString(doc.leftMargin, y, branding.get("footer_text") or "")
    if branding.get("show_page_number"):
        canvas_obj.drawRightString(width - doc.rightMargin, y, f"Página {canvas_obj.getPageNumber()}")
    canvas_obj.restoreState()


def _draw_page_frame(canvas_obj, doc, branding: Dict[str, Any]):
    _draw_header(canvas_obj, doc, branding)
    _draw_footer(canvas_obj, doc, branding)


def build_pdf(doc, story, branding: Dict[str, Any]):
    def _on_page(canvas_obj, doc_obj):
        _draw_page_frame(canvas_obj, doc_obj, branding)

    doc.build(
        story,
        onFirstPage=_on_page,
        onLaterPages=_on_page,
    )


def generate_pdf(story, branding: Optional[Dict[str, Any]] = None, doc_kwargs: Optional[Dict[str, Any]] = None):
    """
    Convenience helper: build a full PDF returning the BytesIO buffer.
    """
    buffer = BytesIO()
    doc, branding_cfg = create_document(buffer, branding=branding, doc_kwargs=doc_kwargs)
    build_pdf(doc, story, branding_cfg)
    buffer.seek(0)
    return buffer


def grid_table(headers: Sequence[str], rows: Sequence[Sequence[Any]], branding: Optional[Dict[str, Any]] = None) -> Table:
    """Tabela em grade com cabeçalho repetido em cada página."""
    header_color = (branding or {}).get("primary_color") or ACABOI_GREEN
    styles = getSampleStyleSheet()
    cell_style = ParagraphStyle("Cell", parent=styles["BodyText"], fontSize=8, leading=10)

    data: List[List[Any]] = [list(headers)]
    for row in rows:
        data.append([Paragraph(str(value), cell_style) for value in row])

    table = Table(data, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), header_color),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, 0), 9),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F5F5F5")]),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDBDBD")),
            ]
        )
    )
    return table


def generate_table_pdf(
    title: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[Any]],
    branding: Optional[Dict[str, Any]] = None,
) -> BytesIO:
    branding = {**(branding or {}), "report_title": title}
    story = [Spacer(1, 2 * mm), grid_table(headers, rows, branding)]
    if not rows:
        styles = getSampleStyleSheet()
        story.append(Spacer(1, 4 * mm))
        story.append(Paragraph("Nenhum registro encontrado para os filtros informados.", styles["BodyText"]))
    logger.debug("Gerando PDF '%s' com %d linhas", title, len(rows))
    return generate_pdf(story, branding=branding)
