"""
Simple wrapper around SHA-256 providing the digests that get signed.

Every message is hashed with SHA-256 before it is handed to the signature
scheme. Text is hashed over its UTF-8 encoding.
"""

import hashlib


# Length in bytes of every digest produced here
DIGEST_LEN = 32


class HashResult:
    """Container for hash results that can return bytes via as_ref()"""

    __slots__ = ("_bytes",)

    def __init__(self, hash_bytes: bytes):
        if len(hash_bytes) != DIGEST_LEN:
            raise ValueError(f"Digest must be {DIGEST_LEN} bytes, got {len(hash_bytes)}")
        object.__setattr__(self, "_bytes", bytes(hash_bytes))

    def __setattr__(self, name, value):
        raise AttributeError("HashResult is immutable")

    def as_ref(self) -> bytes:
        """Return the hash bytes"""
        return self._bytes

    def hex(self) -> str:
        return self._bytes.hex()

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return len(self._bytes)

    def __eq__(self, other) -> bool:
        if isinstance(other, HashResult):
            return self._bytes == other._bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __repr__(self) -> str:
        return f"HashResult({self.hex()})"


class Hasher:
    """Incremental SHA-256 hash engine"""

    def __init__(self, algorithm: str = "sha256"):
        if algorithm != "sha256":
            raise ValueError(f"Unsupported hash algorithm: {algorithm}")
        self._algorithm = algorithm
        self._hasher = hashlib.sha256()

    @classmethod
    def sha256(cls) -> 'Hasher':
        """Create a SHA256 hasher"""
        return cls('sha256')

    def update(self, data: bytes) -> None:
        """Update the hasher with new data"""
        self._hasher.update(data)

    def finish(self) -> HashResult:
        """Finalize the hash and return the result"""
        return HashResult(self._hasher.digest())


def hash_bytes(data: bytes) -> HashResult:
    """
    Hash a byte sequence with SHA-256.

    Any byte sequence is valid input, including the empty one.
    """
    hasher = Hasher.sha256()
    hasher.update(bytes(data))
    return hasher.finish()


def hash_string(text: str) -> HashResult:
    """Hash the UTF-8 encoding of a string with SHA-256"""
    return hash_bytes(text.encode("utf-8"))
