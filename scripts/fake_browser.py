"""
Fake Playwright objects for offline tests
Records every call made on the page
"""


PANEL_HTML = '''
<html><body>
<form>
    <input id="ano" value="2023">
    <select id="periodo">
        <option value="1">1º Período</option>
        <option value="2">2º Período</option>
    </select>
    <button id="buscar">Buscar</button>
</form>
{table}
</body></html>
'''

GRADES_TABLE = '''
<table class="tabelas grid-notas">
    <tr>{head}</tr>
    <tr>{row1}</tr>
    <tr>{row2}</tr>
</table>
'''


def grades_html(with_table=True):
    if not with_table:
        return PANEL_HTML.format(table="")
    head = "".join(f"<th>H{i}</th>" for i in range(27))
    row1 = "".join(f"<td>a{i}</td>" for i in range(27))
    row2 = "".join(f"<td>b{i}</td>" for i in range(27))
    return PANEL_HTML.format(table=GRADES_TABLE.format(head=head, row1=row1, row2=row2))


class FakeResponse:
    status = 200


class _Waiter:
    """Stand-in for expect_navigation / expect_response"""

    def __init__(self, page, kind, target, result):
        self.page = page
        self.kind = kind
        self.target = target
        self.result = result

    async def __aenter__(self):
        self.page.calls.append((self.kind, self.target))
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def _value(self):
        return self.result

    @property
    def value(self):
        return self._value()


class FakePage:

    def __init__(self, html=None, session_text="\n  FULANO DE TAL  \n", fail_on=None,
                 close_error=None):
        self.html = grades_html() if html is None else html
        self.session_text = session_text
        self.fail_on = fail_on
        self.close_error = close_error
        self.selected = "1"
        self.calls = []
        self.closed = False

    def _record(self, *call):
        self.calls.append(call)
        if self.fail_on and call[0] == self.fail_on:
            raise TimeoutError(f"Timeout on {call[0]}")

    async def goto(self, url, **kwargs):
        self._record('goto', url)

    async def fill(self, selector, value):
        self._record('fill', selector, value)

    async def click(self, selector):
        self._record('click', selector)

    async def text_content(self, selector):
        self._record('text_content', selector)
        return self.session_text

    async def content(self):
        self._record('content')
        return self.html

    async def select_option(self, selector, value):
        self._record('select_option', selector, value)
        self.selected = value

    async def input_value(self, selector):
        self._record('input_value', selector)
        return "2023"

    async def eval_on_selector(self, selector, expression):
        self._record('eval_on_selector', selector)
        return f"{self.selected}º Período"

    def expect_navigation(self, wait_until=None):
        return _Waiter(self, 'expect_navigation', wait_until, None)

    def expect_response(self, url):
        return _Waiter(self, 'expect_response', url, FakeResponse())

    async def close(self):
        if self.close_error:
            raise self.close_error
        self.closed = True


class FakeBrowser:

    def __init__(self, page):
        self.page = page
        self.closed = False
        self.launch_kwargs = None

    async def new_page(self):
        return self.page

    async def close(self):
        self.closed = True


class FakePlaywright:

    def __init__(self, page):
        self.browser = FakeBrowser(page)
        self.chromium = self
        self.stopped = False

    async def launch(self, **kwargs):
        self.browser.launch_kwargs = kwargs
        return self.browser

    async def stop(self):
        self.stopped = True


class FakeAsyncPlaywright:
    """Replacement for async_playwright()"""

    def __init__(self, page):
        self.playwright = FakePlaywright(page)

    def __call__(self):
        return self

    async def start(self):
        return self.playwright
