import sys


MITL_EXTENSION = ".mitl"


def add_mitl_extension(filename):
    """
    Append the .mitl extension unless the filename already contains it anywhere.

    Args:
        filename (str): Output filename. Example: "output"

    Returns:
        str: Filename with extension. Example: "output.mitl"
    """
    if MITL_EXTENSION not in filename:
        filename += MITL_EXTENSION
    return filename


def write_mitl_to_file(mitl_formula, filename):
    """
    Write the MITL formula to a .mitl file. No newline is added after the formula.

    Args:
        mitl_formula (str): MITL formula.
        filename (str): Output filename, with or without extension.

    Returns:
        str: Path of the written file, None if it could not be written.
    """
    filename = add_mitl_extension(filename)

    try:
        with open(filename, "w", encoding="utf-8") as file:
            file.write(mitl_formula)
    except OSError:
        print(f"Error: Unable to write to file {filename}", file=sys.stderr)
        return None

    print(f"MITL formula written to {filename}")
    return filename


def read_line(prompt=""):
    """
    Read a full line from standard input.

    Args:
        prompt (str): Prompt printed before reading.

    Returns:
        str: Line without the trailing newline. Empty string at end of input.
    """
    try:
        return input(prompt)
    except EOFError:
        return ""


def read_token(prompt=""):
    """
    Read the next whitespace-delimited token from standard input, skipping blank lines.

    Args:
        prompt (str): Prompt printed before reading.

    Returns:
        str: First token. None at end of input.
    """
    print(prompt, end="", flush=True)
    for line in sys.stdin:
        tokens = line.split()
        if tokens:
            return tokens[0]
    return None


def format_time(t):
    """
    Format a time in %g style, without trailing zeros.

    Args:
        t (float): Time.

    Returns:
        str: Formatted time. Example: 0.1 -> "0.1", 30.0 -> "30"
    """
    return f"{t:g}"
