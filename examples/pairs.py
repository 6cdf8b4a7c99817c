"""Build color pairs a few different ways and print how they encode."""
from clicolor import ColorContext, ColorPair, MemoryConsole, Palette, parse_style_string, use_context

if __name__ == "__main__":
    with use_context(ColorContext(MemoryConsole(Palette.White, Palette.DarkBlue))):
        pairs = [
            ColorPair(),
            ColorPair.from_text("e1"),
            ColorPair.from_text("*c"),
            ColorPair.from_text("orange", "#202020"),
            ColorPair.from_rgb((10, 200, 10), (90, 0, 90)),
            parse_style_string("forecolor: coral; backcolor: navy;"),
        ]

        for pair in pairs:
            print(f"{str(pair):<28} {pair.to_hex_pair()}  {pair.to_style_string()}")

        print("inverse of", pairs[1], "is", pairs[1].inverse)
