# talisman

Building blocks for finding secrets in file content before it is committed.

## Modules

- `talisman.entropy`
  - `shannon_entropy(text, superset)` gives the Shannon entropy of `text`
    over the characters of `superset`. An empty string has entropy 0.
  - `entropy_candidates(word, min_length, superset)` returns the runs of
    `superset` characters in `word` that are longer than `min_length`.
- `talisman.hex_detector`
  - `HexDetector().check(word)` returns `word` when it holds a run of more
    than 20 hex characters whose entropy is above 2.7, else `None`.
- `talisman.base64_detector`
  - `Base64Detector(entropy_threshold=None, aggressive=False)` flags words
    holding a run of more than 20 base64 characters whose entropy is above
    the threshold. The threshold defaults to 4.5 and is replaced only by a
    positive value.
  - `Base64Detector.check(word)` returns `word` when it is flagged. With
    `aggressive=True`, a word that is not flagged by entropy is split on `.`,
    `-` and `=`, and the first piece longer than 15 characters that decodes
    as base64 is returned. Otherwise it returns `None`.
  - The `words_only` attribute may be set to a predicate taking a candidate
    string; candidates for which it returns true are not flagged. It is
    `None` by default, so no candidate is exempted.
  - `Base64AggressiveDetector().test(text)` runs the aggressive check alone.
- `talisman.credit_card`
  - `is_luhn_number(content)` applies the Luhn checksum.
  - `CreditCardDetector().check(content)` returns `content` when it passes
    the Luhn check and matches one of the known card issuer patterns in
    `CREDIT_CARD_PATTERNS`, else `None`.
- `talisman.content_scan`
  - `scan_content(data, check)` splits `data` (bytes or text) into lines and
    whitespace separated words, calls `check` on each word and returns the
    findings.
  - `strip_checksums(text)` removes `checksum: <hex>` entries.
  - `format_for_reporting(text)` cuts text longer than 50 characters to 47
    characters followed by `...`.
  - `ContentType` has the members `BASE64`, `HEX` and `CREDIT_CARD`;
    `info()` gives the log line and `message(finding)` the report message,
    with the finding shortened by `format_for_reporting`.
- `talisman.results`
  - `DetectionResults` collects findings per file path with `fail`, `warn`
    and `ignore`. Repeated failures or warnings with the same category and
    message merge their commits; an ignore is recorded once per category.
  - Failures count towards `has_failures()` only for the categories
    `filecontent`, `filename` and `filesize`; `successful()` is its negation.
    `has_warnings()`, `has_ignores()` and `has_detection_messages()` report
    the other counts.
  - `get_failures(file_path)` returns the `Details` recorded against a path,
    or an empty list.
  - `report_file_failures(file_path)` and `report_file_warnings(file_path)`
    return table rows of file, message and severity, with messages longer
    than 150 characters broken by a newline. They raise `KeyError` for a path
    with no results.
  - `to_dict()` returns the summary counts and per-file results as plain
    data.

## Example

```python
from talisman.content_scan import ContentType, scan_content
from talisman.hex_detector import HexDetector
from talisman.results import DetectionResults

detector = HexDetector()
data = b"value = 6A6176617375636B73676F726F636B7368616861\n"

results = DetectionResults()
for finding in scan_content(data, detector.check):
    results.fail("config.txt", "filecontent", ContentType.HEX.message(finding), [], "low")

print(results.has_failures())                       # True
print(results.report_file_failures("config.txt"))
```

## What this package does not do

It has no command-line tool and does not read a git repository, hooks or
staged changes. It has no file-name or file-size detectors, no ignore-file
handling or checksums of files, no built-in dictionary of English words, and
no interactive prompts or rendered report tables. Severity values are taken
as given and only turned into strings for reports.

## Installing

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```