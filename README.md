# vitapkg

A pure-Python library of building blocks for managing PS Vita content
packages. It needs nothing outside the standard library.

## Modules

- `vitapkg.inflate`: a raw DEFLATE decoder. `inflate(source, dictionary, max_output)`
  accepts a preset dictionary that back-references may reach into and an
  optional output limit. It returns an `InflateResult` holding `data` and
  `consumed`, which is the number of input bytes used. Failures raise
  `InflateError`, whose `code` is 2 when the input runs out, 1 when the
  output limit is reached, and negative for malformed data.
- `vitapkg.zrif`: `decode_zrif(text)` turns a zRIF string into licence bytes,
  which are 512 or 1024 bytes long. It is built from three steps that are also
  available on their own: `base64_decode` (lenient), `zlib_inflate` (accepts
  the zRIF preset dictionary and checks the Adler-32 checksum) and `adler32`.
  Failures raise `ZrifError`, a subclass of `ValueError`.
- `vitapkg.sha256`: an incremental `Sha256` hash with `update`, `digest` and
  `hexdigest`, plus `sha256_vector`. It also provides the console's variant
  of HMAC-SHA256, `hmac_sha256` and `hmac_sha256_vector`, which takes at most
  five parts. The outer pad is derived from the inner pad by XOR with 0x6A.
- `vitapkg.fileutil`: filesystem helpers. These are `mkdirs`, `remove` (logs
  failures and does not raise), `load`, `save`, `file_exists`, `rename`
  (overwrites the target), `get_size` (returns -1 on failure), `inode_type`
  (returns an `InodeType`) and `list_dir` (returns an empty list for a missing
  directory).
- `vitapkg.textutil`: UTF-8 to UTF-16 conversion under a size limit
  (`utf8_to_utf16`, `utf16_to_utf8`), and the font-selection checks
  `is_korean_char` and `is_latin_char`.
- `vitapkg.listview`: list display logic.
  - `friendly_size` formats a byte count for display.
  - `format_speed` formats a download speed.
  - `SpeedMeter` measures download speed over windows of at least one second.
  - `ListCursor` handles scrolling: `up`, `down`, `page_up`, `page_down`,
    `reposition` and `reset`.
- `vitapkg.modes`: the browsing modes (`Mode`) and how they map to
  `ContentType` (`mode_to_type`) and `BgdlType` (`mode_to_bgdl_type`). It also
  provides:
  - `theme_is_installed`
  - `refresh_mask`
  - `mode_partition`
  - the status-line helpers `count_text` and `refresh_text`

## Installation

```
pip install .
```

## Example

```python
from vitapkg.zrif import decode_zrif, ZrifError
from vitapkg.sha256 import Sha256

try:
    rif = decode_zrif(zrif_text)
except ZrifError as exc:
    print(f"bad licence: {exc}")

print(Sha256(b"abc").hexdigest())
```

## What it does not do

This is a library only. It has no command-line program and no on-screen
interface. It does not download or install packages. It has no catalogue
database, and it does not read `param.sfo` files or controller input.

## Running the tests

```
pip install .[test]
pytest
```