import pytest
from html_query_parser import HTMLParser, css

HTML = """
<html>
  <head><title>Test Page</title></head>
  <body>
    <header id="main-header" class="header sticky">
      <h1 class="title highlight">Hello World</h1>
    </header>

    <main>
      <article id="post-1" class="post featured" data-author="alice" data-views="120">
        <h2 class="post-title">First Post</h2>
        <p class="excerpt">First excerpt</p>
      </article>

      <article id="post-2" class="post" data-author="bob" data-views="80">
        <h2 class="post-title">Second Post</h2>
        <p class="excerpt">Second excerpt</p>
      </article>

      <article id="post-3" class="post" data-author="alice" data-views="200">
        <h2 class="post-title">Third Post</h2>
        <p class="excerpt">Third excerpt</p>
      </article>
    </main>

    <ul id="tag-list">
      <li class="tag">rust</li>
      <li class="tag">napi</li>
      <li class="tag">nodejs</li>
      <li class="tag">wasm</li>
    </ul>

    <a href="https://example.com" id="main-link" class="link external" data-track="cta">Visit</a>

    <section id="nested">
      <div id="nested-parent">
        <p id="nested-child-1">First child</p>
        <p id="nested-child-2">Last child</p>
      </div>
    </section>
  </body>
</html>
"""

@pytest.fixture
def html():
    """Return the shared HTML fixture."""
    return HTML

@pytest.fixture
def parser():
    """Return an HTMLParser over the shared fixture."""
    return HTMLParser(HTML)

@pytest.fixture
def select(parser):
    """Return a helper that selects the first CSS match in the fixture."""
    def _select(selector):
        return parser.select_first(css(selector))
    return _select
