# placewords

`placewords` names a spot on Earth with three words. An optional fourth word
adds precision. The words are derived from a 64-bit S2 cell id, and an
address looks like this:

    s2pw://researching.oncoming.refereed.wray

The package has four modules:

- `placewords.s2` covers geometry. It is a small self-contained S2
  implementation using the quadratic projection. It converts between
  latitude/longitude, given in millionths of a degree ("E6"), and 64-bit S2
  leaf cell ids. It is close to the reference S2 library but is not
  guaranteed to agree with it bit for bit.
- `placewords.codec` covers encoding.
  - The 42 central bits of a cell id are scrambled by running a
    linear-feedback shift register 42 steps. They are then split into three
    14-bit word ordinals.
  - One of the three cube-face bits becomes the low bit of each ordinal.
  - The fourth word carries further precision bits.
- `placewords.words` holds the word lists that map ordinals 0–32767 to words
  and back.
- `placewords.cli` is the command-line tool.

The package has no runtime dependencies beyond the standard library.

## Installation

    pip install .

## Word lists are not included

The package ships no word lists. Both the codec and the command need a word
file for each language you want to use. You must supply these files yourself.

### File format

Each language is a text file named `<language>.txt`, for example `en.txt`.
Each line holds an ordinal, a single space, and one or more comma-separated
words:

    0 aardvark
    1 abacus,abaci
    # a '#' ends the line's content, as does any control character

Lines without a space carry no words.

### Rules

- Every ordinal from 0 to 32767 must have at least one word.
- Ordinals outside that range are rejected.
- No word may appear twice.
- Several words may share an ordinal. When encoding, the last one listed is
  used. When decoding, any of them is accepted.

A list that breaks these rules raises `placewords.words.WordListError`. The
same error is raised when the file cannot be opened. Files are read as UTF-8.

## Command line

Run the command from a directory that contains `words/<language>.txt`.

    placewords 44.911759 -116.114708
    placewords 44911759 -116114708
    placewords 54A666CFFFFFFB6F
    placewords s2pw://researching.oncoming.refereed
    placewords s2pw://researching.oncoming.refereed.wray

The input can take these forms:

- **Two arguments.** These are a latitude and a longitude. They are read as
  degrees if either contains a `.`, and as E6 integers otherwise. South
  latitudes and west longitudes are negative.
- **One argument containing `:`.** This is decoded as a placewords address.
- **Any other single argument.** This is read as a hexadecimal S2 cell id.

The command prints the S2 cell id, the E6 coordinates and the decimal
coordinates. For coordinate input and hex input it also prints the words.
With any other number of arguments it prints a usage message.

To use a language other than English (`en`), put `=LANG` first:

    placewords =de 52.5200 13.4050

The language code ends at the first character that is not an ASCII letter or
digit.

On an error, the command prints a message to standard error and exits with
status 1. Errors include a bad hex digit, an unknown word, a missing word
file and an empty language code.

## Library use

```python
from placewords.s2 import ll_to_s2, s2_to_ll
from placewords.codec import Placewords

cell = ll_to_s2(44911759, -116114708)
lat_e6, lon_e6 = s2_to_ll(cell)   # a corner of the cell, in E6

codec = Placewords.for_language("en", "words")   # reads words/en.txt
address = codec.encode(cell)      # "s2pw://w1.w2.w3.w4"
assert codec.decode(address) == cell
```

### Errors

`s2_to_ll` raises `ValueError` when an id names no valid cube face. The
faces are listed in the `placewords.s2.Face` enum.

`Placewords.decode` raises `placewords.codec.PlacewordsError`, a subclass of
`ValueError`, in these cases:

- the text does not start with `s2pw://`;
- the text is longer than 256 bytes;
- it has fewer than three words;
- one of the first three words is unknown.

An unknown fourth word is ignored.

### Other helpers

`placewords.codec.lfsr_forward` and `lfsr_reverse` expose the bit
scrambling and its inverse.

`placewords.s2.double_to_e6` converts degrees to E6.

### Building a word list yourself

You can also build a word list yourself and pass it in:

```python
from placewords.codec import Placewords
from placewords.words import WordList

with open("words/en.txt", encoding="utf-8") as handle:
    words = WordList.from_lines(handle)

codec = Placewords(words)
```

`WordList` has these methods:

- `word_to_ordinal` raises `KeyError` for an unknown word.
- `ordinal_to_word` raises `IndexError` for an ordinal outside 0–32767.
- `len()` gives the number of distinct words.