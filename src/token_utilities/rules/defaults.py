"""Built-in rule tables and class matchers."""

from __future__ import annotations

from token_utilities.rules.model import StaticRule, TokenRule, VariantKind, VariantRule

DEFAULT_CLASS_MATCHERS: tuple[str, ...] = (
    "className",
    "class",
    "classList",
    "class:list",
    "clsx",
    "cn",
)

# ---------------------------------------------------------------------------
# Static rules
# ---------------------------------------------------------------------------

_LINE_STYLES = ("solid", "dashed", "dotted", "double", "none")
_BORDER_SIDES = (("", "border"), ("t-", "border-top"), ("r-", "border-right"),
                 ("b-", "border-bottom"), ("l-", "border-left"))

_BORDER_STYLES = [
    StaticRule(f"border-{side}{style}", f"{prop}-style: {style}")
    for style in _LINE_STYLES
    for side, prop in _BORDER_SIDES
]

_OUTLINE_STYLES = [
    StaticRule("outline-none", "outline: 2px solid transparent; outline-offset: 2px")
    if style == "none"
    else StaticRule(f"outline-{style}", f"outline-style: {style}")
    for style in _LINE_STYLES
]

_OUTLINE_OFFSETS = [
    StaticRule(f"outline-offset-{offset}", f"outline-offset: {offset}px")
    for offset in (0, 1, 2, 4, 8)
]


def _table(prefix: str, prop: str, values: dict[str, str]) -> list[StaticRule]:
    return [StaticRule(f"{prefix}{name}", f"{prop}: {value}") for name, value in values.items()]


_SIZE_KEYWORDS = {
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

DEFAULT_STATIC_RULES: tuple[StaticRule, ...] = (
    # Display
    *_table("", "display", {
        "block": "block",
        "inline-block": "inline-block",
        "inline": "inline",
        "flex": "flex",
        "inline-flex": "inline-flex",
        "grid": "grid",
        "inline-grid": "inline-grid",
    }),
    StaticRule("hidden", "display: none"),
    # Position
    *_table("", "position", {p: p for p in ("static", "fixed", "absolute", "relative", "sticky")}),
    # Overflow
    *_table("overflow-", "overflow", {v: v for v in ("auto", "hidden", "visible", "scroll")}),
    StaticRule("overflow-x-auto", "overflow-x: auto"),
    StaticRule("overflow-y-auto", "overflow-y: auto"),
    StaticRule("overflow-x-hidden", "overflow-x: hidden"),
    StaticRule("overflow-y-hidden", "overflow-y: hidden"),
    # Flexbox
    *_table("flex-", "flex-direction", {
        "row": "row",
        "row-reverse": "row-reverse",
        "col": "column",
        "col-reverse": "column-reverse",
    }),
    *_table("flex-", "flex-wrap", {"wrap": "wrap", "wrap-reverse": "wrap-reverse", "nowrap": "nowrap"}),
    *_table("flex-", "flex", {"1": "1 1 0%", "auto": "1 1 auto", "initial": "0 1 auto", "none": "none"}),
    StaticRule("flex-grow", "flex-grow: 1"),
    StaticRule("flex-grow-0", "flex-grow: 0"),
    StaticRule("flex-shrink", "flex-shrink: 1"),
    StaticRule("flex-shrink-0", "flex-shrink: 0"),
    # Align & justify
    *_table("items-", "align-items", {
        "start": "flex-start",
        "end": "flex-end",
        "center": "center",
        "baseline": "baseline",
        "stretch": "stretch",
    }),
    *_table("justify-", "justify-content", {
        "start": "flex-start",
        "end": "flex-end",
        "center": "center",
        "between": "space-between",
        "around": "space-around",
        "evenly": "space-evenly",
    }),
    *_table("self-", "align-self", {
        "auto": "auto",
        "start": "flex-start",
        "end": "flex-end",
        "center": "center",
        "stretch": "stretch",
    }),
    # Text alignment & transform
    *_table("text-", "text-align", {v: v for v in ("left", "center", "right", "justify")}),
    *_table("", "text-transform", {v: v for v in ("uppercase", "lowercase", "capitalize")}),
    StaticRule("normal-case", "text-transform: none"),
    # Text decoration
    StaticRule("underline", "text-decoration: underline"),
    StaticRule("line-through", "text-decoration: line-through"),
    StaticRule("no-underline", "text-decoration: none"),
    # Whitespace & word break
    *_table("whitespace-", "white-space", {v: v for v in ("normal", "nowrap", "pre", "pre-line", "pre-wrap")}),
    StaticRule("break-normal", "word-break: normal; overflow-wrap: normal"),
    StaticRule("break-words", "overflow-wrap: break-word"),
    StaticRule("break-all", "word-break: break-all"),
    # Cursor
    *_table("cursor-", "cursor", {
        v: v for v in ("auto", "default", "pointer", "wait", "text", "move", "not-allowed")
    }),
    # User select & pointer events
    *_table("select-", "user-select", {v: v for v in ("none", "text", "all", "auto")}),
    *_table("pointer-events-", "pointer-events", {"none": "none", "auto": "auto"}),
    # Opacity
    *_table("opacity-", "opacity", {"0": "0", "25": "0.25", "50": "0.5", "75": "0.75", "100": "1"}),
    # Z-index
    *_table("z-", "z-index", {v: v for v in ("0", "10", "20", "30", "40", "50", "auto")}),
    # Object fit
    *_table("object-", "object-fit", {v: v for v in ("contain", "cover", "fill", "none", "scale-down")}),
    # Visibility
    StaticRule("visible", "visibility: visible"),
    StaticRule("invisible", "visibility: hidden"),
    # Grid
    StaticRule("col-auto", "grid-column: auto"),
    StaticRule("row-auto", "grid-row: auto"),
    StaticRule("col-span-full", "grid-column: 1 / -1"),
    StaticRule("row-span-full", "grid-row: 1 / -1"),
    # Outline & border
    *_OUTLINE_OFFSETS,
    *_OUTLINE_STYLES,
    *_BORDER_STYLES,
    # Auto margins
    StaticRule("m-auto", "margin: auto"),
    StaticRule("mx-auto", "margin-left: auto; margin-right: auto"),
    StaticRule("my-auto", "margin-top: auto; margin-bottom: auto"),
    StaticRule("mt-auto", "margin-top: auto"),
    StaticRule("mr-auto", "margin-right: auto"),
    StaticRule("mb-auto", "margin-bottom: auto"),
    StaticRule("ml-auto", "margin-left: auto"),
    # Width & height
    *_table("w-", "width", {"auto": "auto", "full": "100%", "screen": "100vw", **_SIZE_KEYWORDS}),
    *_table("h-", "height", {"auto": "auto", "full": "100%", "screen": "100vh", **_SIZE_KEYWORDS}),
    *_table("max-w-", "max-width", {"none": "none", "full": "100%", "screen": "100vw", **_SIZE_KEYWORDS}),
    *_table("min-w-", "min-width", {"full": "100%", "screen": "100vw", **_SIZE_KEYWORDS}),
    *_table("max-h-", "max-height", {"none": "none", "full": "100%", "screen": "100vh", **_SIZE_KEYWORDS}),
    StaticRule("min-h-0", "min-height: 0px"),
    *_table("min-h-", "min-height", {"full": "100%", "screen": "100vh", **_SIZE_KEYWORDS}),
)

# ---------------------------------------------------------------------------
# Token rules (tokens must be declared in the project's :root block)
# ---------------------------------------------------------------------------


def _spacing(prefix: str, *properties: str) -> TokenRule:
    return TokenRule(token="spacing", prefix=prefix, properties=properties)


def _background(key: str, value: str) -> str:
    if key.startswith("gradient-"):
        return f"background: linear-gradient(to right, {value}, transparent);"
    return f"background-color: {value};"


DEFAULT_TOKEN_RULES: tuple[TokenRule, ...] = (
    # Gap
    _spacing("gap-", "gap"),
    _spacing("gap-x-", "column-gap"),
    _spacing("gap-y-", "row-gap"),
    # Padding
    _spacing("p-", "padding"),
    _spacing("pt-", "padding-top"),
    _spacing("pr-", "padding-right"),
    _spacing("pb-", "padding-bottom"),
    _spacing("pl-", "padding-left"),
    _spacing("px-", "padding-left", "padding-right"),
    _spacing("py-", "padding-top", "padding-bottom"),
    # Margin
    _spacing("m-", "margin"),
    _spacing("mt-", "margin-top"),
    _spacing("mr-", "margin-right"),
    _spacing("mb-", "margin-bottom"),
    _spacing("ml-", "margin-left"),
    _spacing("mx-", "margin-left", "margin-right"),
    _spacing("my-", "margin-top", "margin-bottom"),
    # Size
    _spacing("w-", "width"),
    _spacing("h-", "height"),
    _spacing("min-w-", "min-width"),
    _spacing("min-h-", "min-height"),
    _spacing("max-w-", "max-width"),
    _spacing("max-h-", "max-height"),
    # Inset
    _spacing("inset-", "inset"),
    _spacing("inset-x-", "left", "right"),
    _spacing("inset-y-", "top", "bottom"),
    _spacing("top-", "top"),
    _spacing("right-", "right"),
    _spacing("bottom-", "bottom"),
    _spacing("left-", "left"),
    # Colors
    TokenRule(token="color", prefix="bg-", builder=_background),
    TokenRule(token="color", prefix="text-", properties=("color",)),
    TokenRule(token="color", prefix="border-", properties=("border-color",)),
    TokenRule(token="color", prefix="outline-", properties=("outline-color",)),
    TokenRule(token="color", prefix="fill-", properties=("fill",)),
    TokenRule(token="color", prefix="stroke-", properties=("stroke",)),
    # Border, outline & radius
    TokenRule(
        token="radius",
        prefix="rounded-",
        properties=("border-radius",),
        overrides={"none": "border-radius: 0;", "full": "border-radius: 9999px;"},
    ),
    TokenRule(token="border", prefix="border-", properties=("border-width",)),
    TokenRule(token="outline", prefix="outline-", properties=("outline-width",)),
    # Typography
    TokenRule(token="font-size", prefix="text-", properties=("font-size",)),
    TokenRule(token="font-weight", prefix="font-", properties=("font-weight",)),
    TokenRule(token="font-family", prefix="font-", properties=("font-family",)),
    # Effects
    TokenRule(token="shadow", prefix="shadow-", properties=("box-shadow",)),
    TokenRule(token="transition", prefix="transition-", properties=("transition",)),
    TokenRule(token="line-height", prefix="leading-", properties=("line-height",)),
)

# ---------------------------------------------------------------------------
# Variant rules (media variants come from @custom-media declarations)
# ---------------------------------------------------------------------------

_INTERACTIVE = ("hover", "focus", "focus-within", "focus-visible", "active", "disabled", "checked")

# Variant name -> pseudo-class
_STRUCTURAL = {
    "first": "first-child",
    "last": "last-child",
    "only": "only-child",
    "odd": "nth-child(odd)",
    "even": "nth-child(even)",
    "first-of-type": "first-of-type",
    "last-of-type": "last-of-type",
    "only-of-type": "only-of-type",
}

DEFAULT_VARIANT_RULES: tuple[VariantRule, ...] = (
    *(VariantRule(name, VariantKind.PSEUDO) for name in _INTERACTIVE),
    *(
        VariantRule(name, VariantKind.PSEUDO, pseudo=None if pseudo == name else pseudo)
        for name, pseudo in _STRUCTURAL.items()
    ),
    # Group: parent state, any descendant
    VariantRule("group-hover", VariantKind.ANCESTOR, selector=".group:hover"),
    VariantRule("group-focus", VariantKind.ANCESTOR, selector=".group:focus"),
    VariantRule("group-active", VariantKind.ANCESTOR, selector=".group:active"),
    # Group direct: immediate children only
    VariantRule("group-hover-direct", VariantKind.ANCESTOR, selector=".group:hover >"),
    VariantRule("group-focus-direct", VariantKind.ANCESTOR, selector=".group:focus >"),
    VariantRule("group-active-direct", VariantKind.ANCESTOR, selector=".group:active >"),
)
