from dataclasses import dataclass

from composable import fn, key_path, map_first, map_over, map_second, over, set_value


@dataclass(frozen=True)
class User:
    name: str
    location: str
    age: int


@dataclass(frozen=True)
class Font:
    family: str
    size: int


@dataclass(frozen=True)
class LabelStyle:
    """Styling for a text label, configured through setters."""

    font: Font
    text_color: str
    alignment: str = "left"


def incr(x: int) -> int:
    return x + 1


def square(x: int) -> int:
    return x * x


def main() -> None:
    # Composition reads left to right
    print(2 | fn(incr) >> square)
    print(list(range(1, 11)) | fn(map_over(fn(incr) >> square >> str)))

    # Slot setters over pairs, nested
    pair = (42, "Hello")
    print(pair | fn(map_first(fn(incr) >> square >> str)) >> map_second(len))

    nested = ("Hello", (42, "World"))
    print(nested | fn(map_second(map_first(incr))))

    # Property setters over records
    user = User(name="Blob", location="NYC", age=42)
    age = key_path(User, "age")
    name = key_path(User, "name")

    birthday = fn(over(age, incr)) >> over(name, str.upper)
    print(user | birthday)
    print([user, user, user] | fn(map_over(birthday)))
    print(f"Original user untouched: {user}")

    # Constant setters as styles
    subtitle = fn(set_value(key_path(LabelStyle, "font", "size"), 17)) >> set_value(
        key_path(LabelStyle, "text_color"), "blue"
    )
    centered = set_value(key_path(LabelStyle, "alignment"), "center")

    print(LabelStyle(Font("Helvetica", 12), "black") | subtitle >> centered)


if __name__ == "__main__":
    main()
