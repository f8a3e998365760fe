"""One constructor per HTML element.

Every function forwards its arguments to `sublimehtml.node.create` with the
tag name fixed:

    from sublimehtml.tags import a, body, div, h1

    body(div(h1("Hello"), a("Docs", href="/docs"), class_="stack"))

Names that would clash with a Python keyword or builtin carry a trailing
underscore: `del_`, `input_`, `map_` and `object_`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .node import ElementNode, create

TagFunction = Callable[..., ElementNode]

# tag name -> constructor
TAG_FUNCTIONS: dict[str, TagFunction] = {}


def _tag_function(tag: str, name: str | None = None) -> TagFunction:
    def constructor(*args: Any, **kwargs: Any) -> ElementNode:
        return create(tag, *args, **kwargs)

    constructor.__name__ = constructor.__qualname__ = name or tag
    constructor.__doc__ = f"Create a <{tag}> element."
    TAG_FUNCTIONS[tag] = constructor
    return constructor


html = _tag_function("html")
head = _tag_function("head")
body = _tag_function("body")
title = _tag_function("title")
meta = _tag_function("meta")
link = _tag_function("link")
style = _tag_function("style")
script = _tag_function("script")
base = _tag_function("base")
header = _tag_function("header")
footer = _tag_function("footer")
main = _tag_function("main")
section = _tag_function("section")
article = _tag_function("article")
aside = _tag_function("aside")
nav = _tag_function("nav")
address = _tag_function("address")
hgroup = _tag_function("hgroup")
search = _tag_function("search")
div = _tag_function("div")
span = _tag_function("span")
p = _tag_function("p")
h1 = _tag_function("h1")
h2 = _tag_function("h2")
h3 = _tag_function("h3")
h4 = _tag_function("h4")
h5 = _tag_function("h5")
h6 = _tag_function("h6")
blockquote = _tag_function("blockquote")
pre = _tag_function("pre")
menu = _tag_function("menu")
figure = _tag_function("figure")
figcaption = _tag_function("figcaption")
hr = _tag_function("hr")
a = _tag_function("a")
abbr = _tag_function("abbr")
b = _tag_function("b")
bdi = _tag_function("bdi")
bdo = _tag_function("bdo")
br = _tag_function("br")
cite = _tag_function("cite")
code = _tag_function("code")
data = _tag_function("data")
dfn = _tag_function("dfn")
em = _tag_function("em")
i = _tag_function("i")
kbd = _tag_function("kbd")
mark = _tag_function("mark")
q = _tag_function("q")
rp = _tag_function("rp")
rt = _tag_function("rt")
ruby = _tag_function("ruby")
s = _tag_function("s")
samp = _tag_function("samp")
small = _tag_function("small")
strong = _tag_function("strong")
sub = _tag_function("sub")
sup = _tag_function("sup")
time = _tag_function("time")
u = _tag_function("u")
var = _tag_function("var")
wbr = _tag_function("wbr")
del_ = _tag_function("del", "del_")
ins = _tag_function("ins")
ul = _tag_function("ul")
ol = _tag_function("ol")
li = _tag_function("li")
dl = _tag_function("dl")
dt = _tag_function("dt")
dd = _tag_function("dd")
img = _tag_function("img")
video = _tag_function("video")
audio = _tag_function("audio")
source = _tag_function("source")
track = _tag_function("track")
picture = _tag_function("picture")
canvas = _tag_function("canvas")
svg = _tag_function("svg")
iframe = _tag_function("iframe")
embed = _tag_function("embed")
object_ = _tag_function("object", "object_")
param = _tag_function("param")
area = _tag_function("area")
map_ = _tag_function("map", "map_")
form = _tag_function("form")
input_ = _tag_function("input", "input_")
button = _tag_function("button")
select = _tag_function("select")
option = _tag_function("option")
optgroup = _tag_function("optgroup")
textarea = _tag_function("textarea")
label = _tag_function("label")
fieldset = _tag_function("fieldset")
legend = _tag_function("legend")
datalist = _tag_function("datalist")
meter = _tag_function("meter")
output = _tag_function("output")
progress = _tag_function("progress")
table = _tag_function("table")
thead = _tag_function("thead")
tbody = _tag_function("tbody")
tfoot = _tag_function("tfoot")
tr = _tag_function("tr")
th = _tag_function("th")
td = _tag_function("td")
caption = _tag_function("caption")
col = _tag_function("col")
colgroup = _tag_function("colgroup")
details = _tag_function("details")
summary = _tag_function("summary")
dialog = _tag_function("dialog")
noscript = _tag_function("noscript")
slot = _tag_function("slot")
template = _tag_function("template")
