"""Pillow layout of the 1200x630 social preview card."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from PIL import Image, ImageColor, ImageDraw, ImageFont

CARD_WIDTH = 1200
CARD_HEIGHT = 630
PADDING_X = 80
PADDING_Y = 60

TITLE_LIMIT = 80
DESCRIPTION_LIMIT = 120
LONG_TITLE = 50

BACKGROUND = "#ffffff"
TITLE_COLOR = "#1a1a1a"
MUTED_COLOR = "#666666"
FOOTER_COLOR = "#999999"
RULE_COLOR = "#ebebeb"

FontType = ImageFont.FreeTypeFont | ImageFont.ImageFont


@dataclass(frozen=True)
class CardSpec:
    title: str
    brand: str
    color: str
    description: str | None = None
    footer: str = ""
    font_path: str | None = None
    logo: Image.Image | None = None


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def title_font_size(title: str) -> int:
    return 42 if len(title) > LONG_TITLE else 52


@lru_cache(maxsize=32)
def load_font(font_path: str | None, size: int) -> FontType:
    if font_path:
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default(size=size)


def wrap_text(draw: ImageDraw.ImageDraw, text: str, font: FontType, max_width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and draw.textlength(candidate, font=font) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def _line_height(font: FontType, size: int, spacing: float) -> int:
    bbox = font.getbbox("Ag")
    return max(int(size * spacing), int((bbox[3] - bbox[1]) * spacing))


def render_card(spec: CardSpec) -> Image.Image:
    accent = ImageColor.getrgb(spec.color)
    card = Image.new("RGB", (CARD_WIDTH, CARD_HEIGHT), BACKGROUND)
    draw = ImageDraw.Draw(card)
    content_width = CARD_WIDTH - 2 * PADDING_X

    # header: accent bar, optional logo, brand
    x = PADDING_X
    draw.rounded_rectangle((x, PADDING_Y, x + 8, PADDING_Y + 40), radius=4, fill=accent)
    x += 8 + 16
    if spec.logo is not None:
        logo = spec.logo.copy()
        logo.thumbnail((160, 40))
        mask = logo if logo.mode == "RGBA" else None
        card.paste(logo, (x, PADDING_Y + (40 - logo.height) // 2), mask)
        x += logo.width + 16
    brand_font = load_font(spec.font_path, 28)
    draw.text((x, PADDING_Y + 20), spec.brand, font=brand_font, fill=MUTED_COLOR, anchor="lm")

    # middle: title and description, vertically centred
    size = title_font_size(spec.title)
    title_font = load_font(spec.font_path, size)
    title_lines = wrap_text(draw, truncate(spec.title, TITLE_LIMIT), title_font, content_width)
    title_step = _line_height(title_font, size, 1.2)
    blocks: list[tuple[list[str], FontType, int, str]] = [(title_lines, title_font, title_step, TITLE_COLOR)]
    if spec.description:
        desc_font = load_font(spec.font_path, 24)
        desc_lines = wrap_text(draw, truncate(spec.description, DESCRIPTION_LIMIT), desc_font, content_width)
        blocks.append((desc_lines, desc_font, _line_height(desc_font, 24, 1.4), MUTED_COLOR))
    gap = 16
    total = sum(len(lines) * step for lines, _, step, _ in blocks) + gap * (len(blocks) - 1)
    middle_top = PADDING_Y + 40
    middle_bottom = CARD_HEIGHT - PADDING_Y - 26 - 24
    y = middle_top + max(0, (middle_bottom - middle_top - total) // 2)
    for lines, font, step, fill in blocks:
        for line in lines:
            draw.text((PADDING_X, y), line, font=font, fill=fill)
            y += step
        y += gap

    # footer: rule, footer text, label
    footer_font = load_font(spec.font_path, 20)
    rule_y = CARD_HEIGHT - PADDING_Y - 26 - 24
    draw.line((PADDING_X, rule_y, CARD_WIDTH - PADDING_X, rule_y), fill=RULE_COLOR, width=2)
    text_y = rule_y + 24 + 13
    if spec.footer:
        draw.text((PADDING_X, text_y), spec.footer, font=footer_font, fill=FOOTER_COLOR, anchor="lm")
    draw.text((CARD_WIDTH - PADDING_X, text_y), "Documentation", font=footer_font, fill=accent, anchor="rm")
    return card
