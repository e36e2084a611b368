# fauxgen

Fake data for tests, fixtures and demos: parts of postal addresses, domains,
URLs, IP and MAC addresses, HTTP status codes, colours, car details, blood
types, languages, MIME types, file extensions, bitcoin and ethereum style
addresses, binary strings and small PNG images. It uses only the standard
library.

## Installing

```
pip install fauxgen
```

To run the test suite as well:

```
pip install "fauxgen[test]"
pytest
```

## Getting started

All randomness comes from a `Randomizer` in `fauxgen.core`. Each area of
data is a provider class that you build around a randomizer:

```python
from fauxgen.core import RandomGenerator, Randomizer
from fauxgen.address import Address
from fauxgen.internet import Internet
from fauxgen.color import Color

rnd = Randomizer()                               # fresh, unseeded
repeatable = Randomizer(RandomGenerator(seed=42))  # same values every run

address = Address(rnd)
address.state()              # e.g. "Oregon"
address.country_code()       # e.g. "NZ"
address.post_code()          # five digits, or five digits, "-" and four digits
address.latitude()           # a float in [0, 100) with six decimals

internet = Internet(rnd)
internet.domain()            # three lowercase letters and a TLD, e.g. "qzv.com"
internet.url()
internet.ipv4()              # four octets from 1 to 255
internet.local_ipv4()        # in 10.x.x.x, 172.16-31.x.x or 192.168.x.x
internet.mac_address()       # six colon-separated pairs of uppercase hex digits
internet.status_code_with_message()   # e.g. "404 Not Found"

Color(rnd).hex()             # e.g. "#1A2B3C"
Color(rnd).css()             # e.g. "rgb(12,200,47)"
```

`Address.building_number()` fills one of the formats `%####`, `%###` or
`%##`; the leading `%` is kept in the result.

### The providers

| Module | Class | Methods |
| --- | --- | --- |
| `fauxgen.address` | `Address` | `city_prefix`, `city_suffix`, `street_suffix`, `secondary_address`, `building_number`, `state`, `state_abbr`, `post_code`, `country`, `country_abbr`, `country_code`, `latitude`, `longitude` |
| `fauxgen.internet` | `Internet` | `password`, `domain`, `free_email_domain`, `safe_email_domain`, `tld`, `slug`, `url`, `ipv4`, `local_ipv4`, `ipv6`, `mac_address`, `http_method`, `status_code`, `status_code_message`, `status_code_with_message` |
| `fauxgen.boolean` | `Boolean` | `bool`, `bool_with_chance`, `bool_int`, `bool_string` |
| `fauxgen.binarystring` | `BinaryString` | `binary_string(length)` |
| `fauxgen.blood` | `Blood` | `name` |
| `fauxgen.gender` | `Gender` | `name`, `abbr` |
| `fauxgen.genre` | `Genre` | `name`, `name_with_description` |
| `fauxgen.car` | `Car` | `maker`, `model`, `category`, `fuel_type`, `transmission_gear`, `plate` |
| `fauxgen.color` | `Color` | `hex`, `rgb`, `rgb_as_array`, `css`, `safe_color_name`, `color_name` |
| `fauxgen.food` | `Food` | `fruit`, `vegetable` |
| `fauxgen.gamer` | `Gamer` | `tag` |
| `fauxgen.language` | `Language` | `language`, `language_abbr`, `programming_language` |
| `fauxgen.mimetype` | `MimeType` | `mime_type` |
| `fauxgen.file` | `File` | `extension` |
| `fauxgen.crypto` | `Crypto` | see below |
| `fauxgen.image` | `Image` | see below |

`Internet.safe_email_domain()` always returns `"example.org"`.
`Internet.ipv6()` returns eight blocks of four digits, each digit from 1 to 8.

### Booleans

```python
from fauxgen.boolean import Boolean

boolean = Boolean(rnd)
boolean.bool()
boolean.bool_with_chance(30)     # true about 30% of the time
boolean.bool_with_chance(100)    # always true (so is anything above 100)
boolean.bool_with_chance(0)      # always false (so is anything below 0)
boolean.bool_int()               # 0 or 1
boolean.bool_string("yes", "no")
```

`Randomizer.bool()` and `Randomizer.bool_with_chance()` do the same directly.

### Crypto addresses

```python
from fauxgen.crypto import Crypto

crypto = Crypto(rnd)
crypto.bitcoin_address()                 # Bech32, P2SH or P2PKH
crypto.p2pkh_address()                   # starts with "1", 26 to 35 characters
crypto.p2sh_address_with_length(30)      # starts with "3", exactly 30 characters
crypto.bech32_address()                  # starts with "bc1"
crypto.etherium_address()                # "0x" followed by 40 letters and digits
```

The body of a bitcoin-style address never contains `0`, `O`, `I` or `l`.

### Genres

```python
from fauxgen.genre import GENRES, Genre

name = Genre(rnd).name()
name, description = Genre(rnd).name_with_description()
```

`GENRES` is a read-only mapping of every name to its description.

### Images

```python
from fauxgen.image import Image

with Image().image(100, 100) as stream:
    print(stream.name)   # a temporary file whose name ends in ".png"
```

`Image.image(width, height)` draws a white picture with a black dot every
four pixels (the top row stays white), writes it as an 8-bit RGB PNG to a new
temporary file and returns that file open. The file is not deleted for you.
File-creation and encoding errors propagate unchanged; a zero width or
height raises `ValueError` from the encoder.

The pieces are usable on their own: `draw_grid(width, height)` returns a
`RasterImage` (with `pixel(x, y)` and `rows()`), `encode_png(stream, image)`
writes any `RasterImage` to a binary stream, and `create_temp_file(pattern)`
makes a temporary file whose name replaces the `*` in the pattern. `Image`
accepts its own `temp_file_creator` and `png_encoder` callables in place of
these.

## Lower-level helpers

`fauxgen.core.Randomizer` holds the building blocks the providers use:

- bounded integers: `int_between(minimum, maximum)` (returns `minimum` when
  the range is empty or reversed) and fixed-width variants such as
  `int8_between` and `uint16_between`, which wrap like machine integers;
- `int`, `int8` … `int64`, `uint`, `uint8` … `uint64`;
- digits: `random_digit` (0–9), `random_digit_not(*digits)`,
  `random_digit_not_null` (1–8), `random_number(size)`;
- floats: `random_float`, `float`, `float32`, `float64`, all taking
  `(max_decimals, minimum, maximum)`;
- picking: `random_string_element`, `random_int_element`,
  `random_string_map_key`, `random_string_map_value` (empty input raises
  `IndexError`);
- letters: `letter`, `random_letter`, `random_string_with_length`;
- templates: `numerify` replaces every `#` with a digit, `lexify` every `?`
  with a lowercase letter, `bothify` does both, and `asciify` replaces every
  `*` with a character from `a` to `~`;
- `shuffle_string`, which returns the text reversed.

A `Randomizer` draws from a `fauxgen.core.Generator`: anything with
`intn(n)` (an integer in `[0, n)`) and `int63()`. `RandomGenerator` is the
default, backed by `random.Random`; subclass `Generator` to feed fixed values
in tests.

## What it does not do

There is no single top-level object that hands out all the providers; you
build each provider around a `Randomizer` yourself. There are no person
names, so no whole street names, cities, full postal addresses, user names
or e-mail addresses. There are no file paths or directory names, only
extensions. There is no command-line tool.