import os
from collections import namedtuple

PROGRAM_NAME = "img2xbm"

Dialect = namedtuple("Dialect", ["name", "include", "placement"])

U8G2 = Dialect("u8g2", "#include <U8g2lib.h>", "U8X8_PROGMEM")
AVR = Dialect("avr", "#include <avr/pgmspace.h>", "PROGMEM")
PLAIN = Dialect("plain", "#include <stdint.h>", "")

DIALECTS = {d.name: d for d in (U8G2, AVR, PLAIN)}


def get_dialect(name):
    try:
        return DIALECTS[name]
    except KeyError:
        raise ValueError(f"unknown dialect '{name}' (choose from {', '.join(DIALECTS)})") from None


class EmissionConfig:
    def __init__(self, var_base="img", provenance="", bytes_per_row=19, indent="    ", dialect=U8G2):
        self.var_base = var_base
        self.provenance = provenance
        self.bytes_per_row = bytes_per_row
        self.indent = indent
        self.dialect = dialect


def format_byte(value):
    return f"0x{value:02X}"


def format_rows(data, bytes_per_row, indent):
    rows = []
    for start in range(0, len(data), bytes_per_row):
        row = data[start:start + bytes_per_row]
        rows.append(indent + ", ".join(format_byte(b) for b in row) + ",")
    return rows


def emit(image, config):
    """Render a packed image as an XBM-style C declaration."""
    dialect = config.dialect
    var = config.var_base

    lines = []
    lines.append(dialect.include)
    lines.append("")
    lines.append(f"// generated from '{os.path.basename(config.provenance)}' using `{PROGRAM_NAME}`")
    lines.append(f"#define {var}_width {image.width}")
    lines.append(f"#define {var}_height {image.height}")

    # the array must stay in flash, not be copied into RAM
    if dialect.placement:
        lines.append(f"static const unsigned char {var}_bits[] {dialect.placement} = {{")
    else:
        lines.append(f"static const unsigned char {var}_bits[] = {{")
    lines.extend(format_rows(image.data, config.bytes_per_row, config.indent))
    lines.append("};")

    return "\n".join(lines)
