import hashlib
import json
import math

def normalize_text(value: str) -> str:
    """
    Minimal normalization so comparisons & cache keys are stable:
    - trim whitespace
    - lowercase
    - collapse multiple spaces
    """
    return " ".join(value.strip().lower().split())

def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (2.5 -> 3), unlike banker's round()."""
    return int(math.floor(value + 0.5))

def fnv1a_32(s: str) -> int:
    """Deterministic, fast hash for seed generation."""
    h = 0x811c9dc5
    for c in s.encode("utf-8"):
        h ^= c
        h = (h * 0x01000193) & 0xFFFFFFFF
    return h

def seeded_rand(seed: int, n: int = 1) -> list[float]:
    """
    Stateless pseudo-random generator (Mulberry32-like) so
    same seed → same outputs without storing PRNG state.
    """
    out = []
    t = (seed + 0x6D2B79F5) & 0xFFFFFFFF
    for _ in range(n):
        t = (t ^ (t >> 15)) * (t | 1) & 0xFFFFFFFF
        t ^= t + ((t ^ (t >> 7)) * (t | 61) & 0xFFFFFFFF)
        r = ((t ^ (t >> 14)) & 0xFFFFFFFF) / 4294967296.0
        out.append(r)
    return out

def fingerprint(obj) -> str:
    """Stable short digest of any JSON-serializable value."""
    raw = json.dumps(obj, sort_keys=True, separators=(',',':'), default=str).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:24]

def weak_etag(payload_bytes: bytes) -> str:
    """Weak ETag for client-side conditional requests."""
    h = hashlib.sha256(payload_bytes).hexdigest()[:24]
    return f'W/"{h}"'
