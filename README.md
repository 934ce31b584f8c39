# antman

A small compressor and its matching expander, for the command line and as a
library.

`antman` compresses a file in up to two stages:

- **Plain-text images**: if the path contains `.ppm`, the header lines are
  kept verbatim. Every following line becomes a single byte, the number that
  line starts with, taken modulo 256. The header ends at the last line, among
  the first ten complete lines, that holds anything other than digits. With no
  such line, the header is ten lines long.
- **Other files under 300,000 bytes**: the first appearance of each word of
  four or more ASCII letters is kept. Later appearances become short
  back-references to it. Input is read up to its first NUL byte.
- **Larger files** skip the first stage.

The result is then Huffman-coded. The stream holds a 32-bit original length,
the code table and the coded bits.

`giantman` decodes the Huffman stream. If the decoded data starts with an
image marker byte, it writes the image header followed by one decimal value
per line. Otherwise it expands the word back-references.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
antman FILE TYPE > FILE.compressed
giantman FILE.compressed TYPE > FILE.restored
```

Both commands need exactly two arguments and write their result to standard
output. `giantman` requires `TYPE` to read as an integer from 1 to 3.
`antman` accepts any `TYPE` and ignores it. Both exit with status 84 in these
cases:

- the wrong number of arguments is given,
- the file cannot be found or read,
- the data cannot be processed.

## Library use

```python
from antman import huffman, words, cli

packed = huffman.encode(b"hello hello hello")
assert huffman.decode(packed) == b"hello hello hello"

text = b"banana split, banana bread"
assert words.uncompress_words(words.compress_words(text)) == text

blob = cli.compress("notes.txt", text)
assert cli.expand(blob) == text
```

Modules:

- `antman.bitstream`: `BitWriter` and `BitReader`, for MSB-first packing of
  integers of any bit width.
- `antman.huffman`: `Node`, `build_tree`, `code_table`, `encode`, `decode`.
- `antman.words`: `split_words`, `unique_words`, `compress_words`,
  `read_dictionary`, `uncompress_words`.
- `antman.image`: `check_line`, `compress_image`, `uncompress_image`, and the
  end `MARKER`.
- `antman.numparse`: `getnbr`, which reads the integer at the start of a text.
  Any run of leading `+`/`-` signs is allowed, and an odd count of `-` makes
  the result negative.
- `antman.cli`: `compress`, `expand`, `antman_main`, `giantman_main`.

## Limitations

- Expansion is not a general archive format. Files of 300,000 bytes or more are
  Huffman-coded as they are, but `giantman` always treats decoded non-image
  data as word-compressed text. For such files, a NUL byte ends the output and
  `0xFF` bytes are read as back-references.
- Text that starts with a byte of `0xF7` or above is taken for an image when
  expanded.
- Image compression keeps only the leading number of each line after the
  header, modulo 256. It restores the original exactly only when each such
  line holds one value from 0 to 255.
- There is no container, no checksum and no file-name record. The output is a
  bare stream written to standard output.