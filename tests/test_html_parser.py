# File: tests/test_html_parser.py
from doc_harvest.parser.html_parser import NO_TITLE, extract_content, extract_plain, normalize_text

LONG = (
    "Configure the client by exporting the token, then run the init command "
    "to create a project skeleton with sensible defaults."
)


def test_title_and_main_content():
    html = (
        "<title>Setup | Example Docs</title>"
        "<nav><a href='/guide'>Guide</a> Menu entries</nav>"
        "<main><p>Install the CLI.</p></main>"
    )
    extracted = extract_content(html)
    assert extracted.title == "Setup"
    assert extracted.content == "Install the CLI."


def test_title_suffix_variants():
    assert extract_content("<title>Quickstart - Acme</title>").title == "Quickstart"
    assert extract_content("<title>Quickstart – Acme</title>").title == "Quickstart"
    assert extract_content("<title>  Plain title  </title>").title == "Plain title"


def test_missing_or_empty_title_defaults():
    assert extract_content("<p>no title here</p>").title == NO_TITLE
    assert extract_content("<title></title>").title == NO_TITLE
    assert extract_content("<title>| Site only</title>").title == NO_TITLE


def test_empty_document():
    extracted = extract_content("")
    assert extracted.title == NO_TITLE
    assert extracted.content == ""


def test_boilerplate_is_removed():
    html = (
        "<html><head><title>Page</title><style>body { color: red }</style></head><body>"
        "<header>Site header</header>"
        "<script>var tracking = 1;</script>"
        "<!-- hidden comment -->"
        "<div class='left-sidebar'>Sidebar links</div>"
        "<div class='Breadcrumb'>Home / Guide</div>"
        "<div class='main-menu'>Products Pricing</div>"
        "<p>Visible paragraph.</p>"
        "<aside>Related pages</aside>"
        "<footer>Copyright</footer>"
        "</body></html>"
    )
    content = extract_content(html).content
    assert content == "Visible paragraph."


def test_short_main_falls_through_to_article():
    html = f"<main><p>Too short.</p></main><article><p>{LONG}</p></article>"
    assert extract_content(html).content == LONG


def test_main_wins_over_later_regions():
    html = f"<div class='docs'>Other text</div><main><p>{LONG}</p></main><article>Article</article>"
    assert extract_content(html).content == LONG


def test_content_div_by_class_then_by_id():
    by_class = f"<p>Intro outside</p><div class='doc-content'><p>{LONG}</p></div>"
    assert extract_content(by_class).content == LONG

    by_id = f"<p>Intro outside</p><div id='main-area'><p>{LONG}</p></div>"
    assert extract_content(by_id).content == LONG


def test_region_threshold_counts_markup():
    # 23 characters of markup is under the threshold, the whole document is used
    html = "<p>Before</p><article><p>Install the CLI.</p></article><p>After</p>"
    assert extract_content(html).content == "Before Install the CLI. After"


def test_fallback_to_whole_document():
    html = "<body><h1>Heading</h1>\n\n<p>First   line</p>\n<p>Second line</p></body>"
    assert extract_content(html).content == "Heading First line Second line"


def test_extraction_is_deterministic():
    html = f"<title>Same | Site</title><main><p>{LONG}</p></main>"
    assert extract_content(html) == extract_content(html)


def test_nested_boilerplate_inside_region():
    html = f"<main><nav>Prev Next</nav><p>{LONG}</p><div class='pagination'>1 2 3</div></main>"
    assert extract_content(html).content == LONG


def test_extract_plain_keeps_raw_title_and_all_text():
    html = (
        "<html><head><title>Setup | Example Docs</title><script>x()</script></head>"
        "<body><nav>Menu</nav><p>Body text</p><style>p {}</style></body></html>"
    )
    extracted = extract_plain(html, fallback_title="https://a.com/x")
    assert extracted.title == "Setup | Example Docs"
    assert extracted.content == "Setup | Example Docs Menu Body text"


def test_extract_plain_title_fallback():
    assert extract_plain("<p>text</p>", fallback_title="https://a.com/x").title == "https://a.com/x"


def test_normalize_text():
    assert normalize_text("  a \n\n b\t\tc  ") == "a b c"
