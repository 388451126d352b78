"""
HTTP transport for Google Play's batchexecute endpoint
"""
import json
from typing import Any, Optional

import requests

from ..config.settings import Config
from ..decoding.path import get_array, value_at
from ..exceptions import TransportError

XSSI_PREFIX = ")]}'"
RPC_PAYLOAD_PATH = "0.2"


def parse_envelope(body: str) -> Any:
    """
    Unwrap a batchexecute response body
    
    Args:
        body: Raw response text, including the anti-XSSI prefix
    
    Returns:
        Parsed RPC payload, or None when the RPC returned nothing
    """
    if body.startswith(XSSI_PREFIX):
        body = body[len(XSSI_PREFIX):]
    text = body.lstrip()
    try:
        envelope, _ = json.JSONDecoder().raw_decode(text)
    except json.JSONDecodeError as e:
        raise TransportError(f"Undecodable batchexecute response: {e}") from e
    
    if not isinstance(envelope, list) or len(envelope) < 1 or len(get_array(envelope, "0")) < 2:
        raise TransportError("invalid size of the resulting array")
    
    payload = value_at(envelope, RPC_PAYLOAD_PATH)
    if not payload:
        return None
    if not isinstance(payload, str):
        return payload
    
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise TransportError(f"Undecodable RPC payload: {e}") from e


class BatchExecuteTransport:
    """Posts URL-encoded RPC payloads and returns the decoded response tree"""
    
    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url or Config.BATCHEXECUTE_URL
        self.timeout = Config.REQUEST_TIMEOUT if timeout is None else timeout
    
    def __call__(self, country: str, language: str, payload: str) -> Any:
        try:
            response = requests.post(
                self.url,
                params={'hl': language, 'gl': country},
                data=payload.encode('utf-8'),
                headers={'Content-Type': 'application/x-www-form-urlencoded;charset=UTF-8'},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"batchexecute request failed: {e}") from e
        
        return parse_envelope(response.text)
