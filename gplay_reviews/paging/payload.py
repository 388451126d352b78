"""
Request payloads for the review listing RPC

The templates are already URL-encoded; placeholders are replaced textually.
"""

MAX_REVIEWS_PER_REQUEST = 150

INITIAL_REQUEST = (
    "f.req=%5B%5B%5B%22UsvDTd%22%2C%22%5Bnull%2Cnull%2C%5B2%2C{{sort}}%2C%5B"
    "{{maxNumberOfReviewsPerRequest}}%2Cnull%2Cnull%5D%2Cnull%2C%5B%5D%5D%2C%5B"
    "%5C%22{{appId}}%5C%22%2C7%5D%5D%22%2Cnull%2C%22generic%22%5D%5D%5D"
)

PAGINATED_REQUEST = (
    "f.req=%5B%5B%5B%22UsvDTd%22%2C%22%5Bnull%2Cnull%2C%5B2%2C{{sort}}%2C%5B"
    "{{maxNumberOfReviewsPerRequest}}%2Cnull%2C%5C%22{{withToken}}%5C%22%5D%2Cnull%2C%5B%5D%5D%2C%5B"
    "%5C%22{{appId}}%5C%22%2C7%5D%5D%22%2Cnull%2C%22generic%22%5D%5D%5D"
)


def _render(template: str, replacements: dict) -> str:
    for placeholder, value in replacements.items():
        template = template.replace(placeholder, value)
    return template


def build_initial_payload(sort: int, page_size: int, app_id: str) -> str:
    """Payload for the first page of reviews of app_id"""
    return _render(INITIAL_REQUEST, {
        "{{sort}}": str(int(sort)),
        "{{maxNumberOfReviewsPerRequest}}": str(page_size),
        "{{appId}}": app_id,
    })


def build_paginated_payload(sort: int, page_size: int, token: str, app_id: str) -> str:
    """Payload for the page that follows the one which returned token"""
    return _render(PAGINATED_REQUEST, {
        "{{sort}}": str(int(sort)),
        "{{maxNumberOfReviewsPerRequest}}": str(page_size),
        "{{withToken}}": token,
        "{{appId}}": app_id,
    })
