"""Content hashing for storage keys."""

import hashlib


def generate_content_hash(content: bytes, algorithm: str = "sha256") -> str:
    """
    Hash file content.

    Args:
        content: Raw file bytes
        algorithm: Any hashlib algorithm name (default sha256)

    Returns:
        Hex digest
    """
    hash_obj = hashlib.new(algorithm)
    hash_obj.update(content)
    return hash_obj.hexdigest()


def generate_file_key(content: bytes, file_extension: str) -> str:
    """
    Build a content-addressed key: ``<hash>.<extension>``.

    Uploading identical bytes twice yields the same key.
    """
    return f"{generate_content_hash(content)}.{file_extension}"
