"""
Tokenizer Module.

Splits command arguments into tokens, keeping quoted spans together.
"""

QUOTE = '"'


def tokenize(remainder: str) -> list[str]:
    """
    Split an argument string into tokens.

    Whitespace separates tokens. A double-quoted span is one token with the
    quotes removed and its inner whitespace kept. ``""`` yields an empty
    token. An unterminated quote takes the rest of the input as the last
    token. There is no escape character.

    Args:
        remainder: Text after the command name

    Returns:
        Tokens in input order

    Examples:
        'listar activas'                    -> ['listar', 'activas']
        '"Juan Pérez" "Profesor de Mate"'   -> ['Juan Pérez', 'Profesor de Mate']
        '"Juan'                             -> ['Juan']
        '"" resto'                          -> ['', 'resto']
    """
    tokens: list[str] = []
    buffer: list[str] = []
    in_quote = False

    for char in remainder:
        if in_quote:
            if char == QUOTE:
                tokens.append("".join(buffer))
                buffer.clear()
                in_quote = False
            else:
                buffer.append(char)
        elif char == QUOTE:
            # Quoted spans never merge with adjacent unquoted text
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
            in_quote = True
        elif char.isspace():
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
        else:
            buffer.append(char)

    if in_quote or buffer:
        tokens.append("".join(buffer))

    return tokens
