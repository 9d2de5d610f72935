class IdentifierRegistry:
    """Names handed out during one generation pass.

    Create one per pass; the first caller of a name keeps it bare and later
    callers get `_2`, `_3`, ... appended to the name they asked for.
    """

    def __init__(self) -> None:
        self._used: set[str] = set()

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._used

    def __len__(self) -> int:
        return len(self._used)

    def dedup(self, identifier: str) -> str:
        if identifier not in self._used:
            self._used.add(identifier)
            return identifier

        counter = 2
        while True:
            candidate = f"{identifier}_{counter}"
            if candidate not in self._used:
                self._used.add(candidate)
                return candidate
            counter += 1


# upper-cased, the enum constants are compared after sanitize_ident
RESERVED_KEYWORDS = frozenset(
    {
        # c
        "AUTO",
        "BREAK",
        "CASE",
        "CHAR",
        "CONST",
        "CONTINUE",
        "DEFAULT",
        "DO",
        "DOUBLE",
        "ELSE",
        "ENUM",
        "EXTERN",
        "FLOAT",
        "FOR",
        "GOTO",
        "IF",
        "INT",
        "LONG",
        "REGISTER",
        "RETURN",
        "SHORT",
        "SIGNED",
        "SIZEOF",
        "STATIC",
        "STRUCT",
        "SWITCH",
        "TYPEDEF",
        "UNION",
        "UNSIGNED",
        "VOID",
        "VOLATILE",
        "WHILE",
        # c++
        "ASM",
        "BOOL",
        "CATCH",
        "CLASS",
        "CONST_CAST",
        "DELETE",
        "DYNAMIC_CAST",
        "EXPLICIT",
        "EXPORT",
        "FALSE",
        "FRIEND",
        "INLINE",
        "MUTABLE",
        "NAMESPACE",
        "NEW",
        "OPERATOR",
        "PRIVATE",
        "PROTECTED",
        "PUBLIC",
        "REINTERPRET_CAST",
        "STATIC_CAST",
        "TEMPLATE",
        "THIS",
        "THROW",
        "TRUE",
        "TRY",
        "TYPEID",
        "TYPENAME",
        "USING",
        "VIRTUAL",
        "WCHAR_T",
        # c++11
        "ALIGNAS",
        "ALIGNOF",
        "CHAR16_T",
        "CHAR32_T",
        "CONSTEXPR",
        "DECLTYPE",
        "NOEXCEPT",
        "NULLPTR",
        "STATIC_ASSERT",
        "THREAD_LOCAL",
        # c++20
        "CONCEPT",
        "REQUIRES",
        "CO_AWAIT",
        "CO_RETURN",
        "CO_YIELD",
        # macros
        "NULL",
        "DATE",
        "TIME",
    }
)

# placeholder names in items.json, these never make it into the enum
INVALID_NAMES = frozenset({"", "0", "NULL", "NONE", "N"})

_IDENT_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_")


def normalize_ident(s: str) -> str:
    """Strip, collapse every run of non `[A-Za-z0-9_]` chars into one `_`, then upper-case."""
    result = []
    in_run = False
    for char in s.strip():
        if char in _IDENT_CHARS:
            result.append(char)
            in_run = False
        elif not in_run:
            result.append("_")
            in_run = True

    return "".join(result).upper()


def prefix_digit(body: str) -> str:
    if body and body[0].isascii() and body[0].isdigit():
        return "_" + body
    return body


def sanitize_ident(s: str) -> str:
    return prefix_digit(normalize_ident(s))


def is_sentinel(body: str) -> bool:
    return body in INVALID_NAMES


def guard_keyword(ident: str) -> str:
    if ident in RESERVED_KEYWORDS:
        return ident + "_"
    return ident


def to_enum_ident(s: str, registry: IdentifierRegistry | None = None) -> str | None:
    """Map an item name to an enum constant, or None if the name is a placeholder.

    >>> to_enum_ident("Health Potion")
    'HEALTH_POTION'
    >>> to_enum_ident("for")
    'FOR_'
    >>> to_enum_ident("9mm")
    '_9MM'
    """
    body = normalize_ident(s)
    if is_sentinel(body):
        return None

    base = guard_keyword(prefix_digit(body))

    if registry is None:
        return base

    return registry.dedup(base)
