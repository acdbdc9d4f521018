"""ESC/POS protocol layer: command primitives for thermal receipt printers."""
