"""Hash-based key identifiers."""

from openpgp_codec.crypto.fingerprint import fingerprint, fingerprint_material, key_id

__all__ = [
    "fingerprint",
    "fingerprint_material",
    "key_id",
]
