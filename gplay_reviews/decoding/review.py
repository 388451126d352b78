"""
Google Play review record decoding
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .path import get_array, get_int, get_str

PLATFORM_NAME = "Google Play Store"

REVIEW_URL = "https://play.google.com/store/apps/details?id={app_id}&reviewId={review_id}"

# Positions of review fields inside one raw record
REVIEW_ID_PATH = "0"
REVIEWER_PATH = "1.0"
AVATAR_PATH = "1.1.3.2"
SCORE_PATH = "2"
TEXT_PATH = "4"
TIMESTAMP_PATH = "5.0"
USEFUL_PATH = "6"
RESPONDENT_PATH = "7.0"
REPLY_PATH = "7.1"
REPLY_TIMESTAMP_PATH = "7.2.0"
VERSION_PATH = "10"
CRITERIA_PATH = "12.0"

# Positions inside one criteria tuple
CRITERION_NAME_PATH = "0"
CRITERION_RATING_PATH = "2.0"

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass(frozen=True)
class Review:
    """A single Google Play user review"""
    review_id: str
    reviewer: str
    avatar: str
    score: int
    text: str
    timestamp: datetime
    useful: int = 0
    version: str = ""
    criteria: Mapping[str, int] = field(default_factory=dict, hash=False)
    reply: str = ""
    reply_timestamp: datetime = EPOCH
    respondent: str = ""
    
    def __post_init__(self):
        object.__setattr__(self, "criteria", MappingProxyType(dict(self.criteria)))
    
    @property
    def has_reply(self) -> bool:
        """A zero reply timestamp only means "no reply" when the reply text is empty too"""
        return bool(self.reply)
    
    def url(self, app_id: str) -> str:
        """Link to this review on the store page of app_id, or "" without an id"""
        if self.review_id:
            return REVIEW_URL.format(app_id=app_id, review_id=self.review_id)
        return ""
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Flatten into the crawler's standardized review format
        
        Returns:
            Dictionary with the common keys 'userName', 'content', 'score',
            'at', 'platform', 'version' followed by the Play-specific fields
        """
        return {
            'userName': self.reviewer,
            'content': self.text,
            'score': self.score,
            'at': self.timestamp,
            'platform': PLATFORM_NAME,
            'version': self.version,
            'reviewId': self.review_id,
            'avatar': self.avatar,
            'useful': self.useful,
            'criteria': dict(self.criteria),
            'reply': self.reply,
            'replyAt': self.reply_timestamp if self.has_reply else None,
            'respondent': self.respondent,
        }


def _epoch_to_datetime(seconds: int) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return EPOCH


def parse_criteria(raw_review: Any) -> Dict[str, int]:
    """
    Decode the per-criterion ratings of a raw review
    
    Each entry looks like [name, ..., [rating, ...]]. Entries with two or
    fewer elements carry no rating and decode to 0. A repeated name keeps
    the last rating seen.
    """
    criteria = {}
    for criterion in get_array(raw_review, CRITERIA_PATH):
        if not isinstance(criterion, list):
            continue
        rating = 0
        if len(criterion) > 2:
            rating = get_int(criterion, CRITERION_RATING_PATH)
        criteria[get_str(criterion, CRITERION_NAME_PATH)] = rating
    return criteria


def parse_review(raw_review: Any) -> Optional[Review]:
    """
    Decode one raw review record
    
    Args:
        raw_review: One element of the page's record list, in positional form
    
    Returns:
        Review, or None when the record has no body text
    """
    text = get_str(raw_review, TEXT_PATH)
    if not text:
        return None
    
    return Review(
        review_id=get_str(raw_review, REVIEW_ID_PATH),
        reviewer=get_str(raw_review, REVIEWER_PATH),
        avatar=get_str(raw_review, AVATAR_PATH),
        score=get_int(raw_review, SCORE_PATH),
        text=text,
        timestamp=_epoch_to_datetime(get_int(raw_review, TIMESTAMP_PATH)),
        useful=get_int(raw_review, USEFUL_PATH),
        version=get_str(raw_review, VERSION_PATH),
        criteria=parse_criteria(raw_review),
        reply=get_str(raw_review, REPLY_PATH),
        reply_timestamp=_epoch_to_datetime(get_int(raw_review, REPLY_TIMESTAMP_PATH)),
        respondent=get_str(raw_review, RESPONDENT_PATH),
    )
