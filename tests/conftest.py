import pytest


def make_raw_review(review_id="r1", reviewer="Alice", avatar="AV", score=5, text="Great app",
                    timestamp=1690000000, useful=3, version="1.2.3", criteria=None, reply=None):
    """Build a raw review record laid out the way the listing RPC returns it"""
    reply_block = None
    if reply is not None:
        respondent, reply_text, reply_epoch = reply
        reply_block = [respondent, reply_text, [reply_epoch, 0]]
    return [
        review_id,
        [reviewer, [None, 2, None, [None, None, avatar]]],
        score,
        None,
        text,
        [timestamp, 0],
        useful,
        reply_block,
        None,
        None,
        version,
        None,
        [criteria if criteria is not None else []],
    ]


def make_page(records, token=None):
    """Build a decoded listing response holding records and an optional token"""
    return [records, [None, token]]


class FakeTransport:
    """Serves canned pages in order and records every call"""

    def __init__(self, pages):
        self.pages = list(pages)
        self.calls = []

    def __call__(self, country, language, payload):
        self.calls.append((country, language, payload))
        page = self.pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture
def raw_review():
    return make_raw_review


@pytest.fixture
def page():
    return make_page


@pytest.fixture
def fake_transport():
    return FakeTransport
