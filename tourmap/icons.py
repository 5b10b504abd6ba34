#Purpose: Numbered circle marker icons for the tour map.
#Colours cycle through a fixed 5-colour palette by point index.

import folium

MARKER_PALETTE = ["#1FB8CD", "#FFC185", "#B4413C", "#5D878F", "#DB4545"]
MARKER_STROKE = "#21808D"


def marker_svg(index: int) -> str:
    """SVG circle labelled with the 1-based point number."""
    fill = MARKER_PALETTE[index % len(MARKER_PALETTE)]
    return (
        '<svg width="36" height="36" viewBox="0 0 36 36" xmlns="http://www.w3.org/2000/svg">'
        f'<circle cx="18" cy="18" r="16" fill="{fill}" stroke="{MARKER_STROKE}" stroke-width="2"/>'
        '<text x="18" y="23" font-size="16" fill="#fff" font-family="Inter,Arial" '
        f'text-anchor="middle" alignment-baseline="middle">{index + 1}</text></svg>'
    )


def marker_icon(index: int) -> folium.DivIcon:
    return folium.DivIcon(
        html=marker_svg(index),
        icon_size=(38, 38),
        icon_anchor=(19, 34),
        popup_anchor=(0, -34),
        class_name="custom-marker",
    )
