from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LatexRule:
    name: str
    pattern: re.Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str) -> LatexRule:
    return LatexRule(name=name, pattern=re.compile(pattern), replacement=replacement)


# Tails of the commands starting with "\t" that are kept. A TAB before one of
# them is a lost backslash; a literal "\t" before anything else is dropped.
_KEPT_T_COMMANDS = (
    r"heta|herefore|au\b|an\b|anh\b|ilde|riangle|op\b|o\b|imes|frac|ag\b"
    r"|ext\{|extbf|extit|extrm|extsf|exttt|ext(?:up|down|right)arrow"
)

# Tails of the commands starting with "\n" that a literal "\n" must not split.
_KEPT_N_COMMANDS = (
    r"(?:eq|e|u|abla|eg|ewline|ot|otin|i|mid|leq|geq|parallel|subseteq|subset"
    r"|exists|earrow|warrow)\b"
)

_ARROWS = r"(\\uparrow|\\downarrow|\\rightarrow|\\to)"


# Order matters: later rules assume the earlier ones have already run.
LATEX_RULES: tuple[LatexRule, ...] = (
    # JSON escapes that ate the backslash of a LaTeX command, e.g. "\theta" -> TAB + "heta".
    _rule("tab_command", rf"\t(?=(?:{_KEPT_T_COMMANDS}))", r"\\t"),
    _rule("carriage_return_command", r"\r(?=ightarrow|ho\b)", r"\\r"),
    _rule("form_feed_command", r"\x0c(?=rac)", r"\\f"),
    _rule("backspace_command", r"\x08(?=eta|oldsymbol)", r"\\b"),
    _rule("literal_tab_escape", rf"\\t(?!{_KEPT_T_COMMANDS})", " "),
    _rule("raw_tab", r"\t", " "),
    _rule("literal_newline_escape", rf"\\n(?!{_KEPT_N_COMMANDS})", "\n"),
    # Missing escapes.
    _rule("times_between_operands", r"(\d|\})\s*imes\s*(\d|10)", r"\1 \\times \2"),
    _rule("bare_times", r"\bimes\b", r"\\times"),
    _rule("bare_micro", r"extmu", r"\\mu"),
    _rule("digit_text_unit", r"(\d)\s*ext([A-Z])", r"\1 \2"),
    _rule("text_unit", r"(?<!\\t)ext([A-Z])", r"\1"),
    _rule("bare_text_group", r"(?<!\\t)(?<!oldt)\\?ext\{([^}]+)\}", r"\1"),
    _rule("bare_ext", r"\\ext\b", ""),
    _rule("digit_micro", r"(\d)mu\b", r"\1\\mu"),
    _rule("superscript_e_xto", r"\^e\s*xto\b", r"^\\circ"),
    _rule("xto", r"xto\b", r"^\\circ"),
    _rule("superscript_e", r"\^e\b", r"^\\circ"),
    _rule("text_o", r"\\text\{o\}", r"^\\circ"),
    _rule("deg", r"(?<![\\a-zA-Z])deg\b", r"^\\circ"),
    _rule("bare_frac", r"(?<![\\a-zA-Z])frac\{", r"\\frac{"),
    # Chemistry shorthand.
    _rule("equilibrium_constant", r"\bK([cpab])\b", r"K_\1"),
    # Wrappers KaTeX does not render; the argument is kept.
    _rule("boldsymbol", r"\\b?oldsymbol", ""),
    _rule("mangled_arrow", r"\\t?ext(up|down|right)arrow", r"\\\1arrow"),
    _rule("style", r"\\style", ""),
    _rule("oldtext", r"\\oldtext", ""),
    # Braces left around arrows once their wrapper is gone.
    _rule("double_braced_arrow", r"\{\s*\{\s*" + _ARROWS + r"\s*\}\s*\}", r"\1"),
    _rule("braced_arrow", r"\{\s*" + _ARROWS + r"\s*\}", r"\1"),
)


def sanitize(text: Any) -> str:
    """
    Best-effort repair of malformed LaTeX in LLM output before it reaches KaTeX.

    Applies LATEX_RULES in order. Unknown or unrepairable markup passes through
    unchanged; non-string input yields an empty string.
    """
    if not isinstance(text, str):
        return ""
    out = text
    for rule in LATEX_RULES:
        out = rule.apply(out)
    return out


def sanitize_fields(value: Any) -> Any:
    """
    Applies `sanitize` to every string inside nested dict/list structures.
    """
    if isinstance(value, str):
        return sanitize(value)

    if isinstance(value, list):
        return [sanitize_fields(item) for item in value]

    if isinstance(value, dict):
        return {key: sanitize_fields(item) for key, item in value.items()}

    return value
