from hashpurge.core.models import HashType

HASH_TYPE_ALIASES = {
    "md5": HashType.MD5,
    "sha1": HashType.SHA1,
    "sha-1": HashType.SHA1,
    "sha256": HashType.SHA256,
    "sha-256": HashType.SHA256,
    "xxh64": HashType.XXH64,
    "xxhash": HashType.XXH64,
}

HASH_TYPE_CHOICES = list(HASH_TYPE_ALIASES.keys())

HASH_TYPE_HELP_TEXT = (
    "Hash algorithm of the target digests:\n"
    "  md5        : 32 hex characters\n"
    "  sha1       : 40 hex characters\n"
    "  sha256     : 64 hex characters\n"
    "  xxh64      : 16 hex characters (never guessed, must be given)\n"
    "Default: guessed from the digest length\n"
)

EPILOG_TEXT = """
Examples:
  Delete every file in Downloads whose MD5 matches
  %(prog)s ~/Downloads -H d41d8cd98f00b204e9800998ecf8427e

  Same, including subdirectories, asking before each deletion
  %(prog)s ~/Downloads -r -i -H d41d8cd98f00b204e9800998ecf8427e

  Several SHA256 digests at once, without following symlinks, with details
  %(prog)s ~/Downloads -r -s -v -H <sha256> <sha256>

  xxHash64 digests have to be requested explicitly
  %(prog)s ~/Downloads -a xxh64 -H ef46db3751d8e999

Deletion is permanent: files are not moved to trash.
"""
