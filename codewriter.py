"""
PROGRAM           -> COMMAND*                      (one command per line)

COMMAND           -> COMMENT | LIST_CREATION | APPEND | FUNCTION_DEF
                   | FUNCTION_CALL | RETURN | FOR_LOOP | WHILE_LOOP
                   | IF_STATEMENT | ARITHMETIC | INCREMENT | DECREMENT
                   | INPUT | VARIABLE_CREATION | ASSIGNMENT | PRINT

COMMENT           -> comment WORD+
LIST_CREATION     -> create list IDENT (value)? VALUE*
APPEND            -> append VALUE ... to IDENT
FUNCTION_DEF      -> (define | create) function IDENT
                     ((parameter | parameters) IDENT*)? (do)? COMMAND?
FUNCTION_CALL     -> call IDENT (value)? VALUE*
RETURN            -> return VALUE?
FOR_LOOP          -> for IDENT (from VALUE | to VALUE | by VALUE)+ do COMMAND?
WHILE_LOOP        -> while CONDITION (do)? COMMAND?
IF_STATEMENT      -> if CONDITION (then)? COMMAND? (else COMMAND?)?
ARITHMETIC        -> ARITH_OP VALUE (and)? VALUE ((store | in)+ IDENT)?
INCREMENT         -> increment IDENT (by VALUE)?
DECREMENT         -> decrement IDENT (by VALUE)?
INPUT             -> input IDENT
VARIABLE_CREATION -> create (variable)? IDENT (value)? (to)? VALUE?
ASSIGNMENT        -> set IDENT (to | value)? (to)? VALUE
PRINT             -> print VALUE+

CONDITION         -> VALUE COMPARATOR VALUE
COMPARATOR        -> not (equal_to | value (to)?) | not_equal (to)?
                   | greater (than)? | less (than)? | equal_to | value (to)?
ARITH_OP          -> add | subtract | multiply | divide | modulus
VALUE             -> NUMBER | STRING | IDENT | BOOLEAN
"""


from enum import Enum
from dataclasses import dataclass, field, fields, replace
from typing import Callable, ClassVar, Dict, Iterator, List, Optional, Sequence, Tuple, Union
import re
import sys


#token definitions
class TokenType(Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Token:
    #represents single classified word
    type: TokenType
    value: str

    def source(self) -> str:
        """Text of the token as it would appear in a command (strings re-quoted)."""
        if self.type == TokenType.STRING:
            return f'"{self.value}"'
        return self.value


# COMPILER DIAGNOSTICS
@dataclass(frozen=True)
class CompileError:
    code: str                 # e.g., "SYN001", "NRM001"
    message: str              # human-friendly error
    line: int = 0             # 1-based source line, 0 when not tied to one
    context: str = ""         # optional: normalized text of the line

    def format(self) -> str:
        loc = f"line {self.line}" if self.line else "input"
        return f"[{self.code}] {loc}: {self.message}"

    def to_dict(self) -> dict:
        return {'line': self.line, 'error': self.message, 'code': self.code}


class ErrorReporter:
    def __init__(self, source: str):
        self.source = source
        self.errors: List[CompileError] = []
        self.warnings: List[CompileError] = []

    def add(self, code: str, message: str, line: int = 0, context: str = ""):
        self.errors.append(CompileError(code, message, line, context))

    def warn(self, warning: CompileError, line: int = 0):
        self.warnings.append(replace(warning, line=line) if line else warning)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def print(self, stream=None):
        if not self.errors and not self.warnings:
            return
        out = stream or sys.stdout
        print("\n" + "-" * 70, file=out)
        print("DIAGNOSTICS", file=out)
        print("-" * 70, file=out)
        for e in self.errors + self.warnings:
            print("  " + e.format().replace("\n", "\n      "), file=out)
            if e.context:
                print(f"      context: {e.context}", file=out)


#vocabulary tables
class Vocabulary:
    #surface word -> canonical keyword
    SYNONYMS = {
        # variable creation
        'make': 'create', 'declare': 'create', 'define': 'create',
        'initialize': 'create', 'init': 'create', 'new': 'create',
        'let': 'create', 'var': 'create',

        # assignment
        'assign': 'set', 'update': 'set', 'change': 'set', 'modify': 'set',

        # value keywords
        'equal': 'value', 'equals': 'value', 'as': 'value', 'with': 'value',
        'of': 'value', 'be': 'value', 'values': 'value',

        # output
        'display': 'print', 'show': 'print', 'output': 'print',
        'write': 'print', 'log': 'print', 'echo': 'print', 'say': 'print',

        # input
        'read': 'input', 'get': 'input', 'ask': 'input', 'prompt': 'input',
        'accept': 'input', 'receive': 'input',

        # arithmetic
        'plus': 'add', 'sum': 'add',
        'subtract': 'subtract', 'minus': 'subtract', 'difference': 'subtract',
        'multiply': 'multiply', 'times': 'multiply', 'product': 'multiply',
        'divide': 'divide', 'over': 'divide', 'quotient': 'divide',
        'modulo': 'modulus', 'mod': 'modulus', 'remainder': 'modulus',

        # comparison
        'bigger': 'greater', 'more': 'greater', 'above': 'greater',
        'larger': 'greater', 'exceeds': 'greater',
        'smaller': 'less', 'below': 'less', 'fewer': 'less', 'under': 'less',
        'same': 'equal_to', 'identical': 'equal_to', 'matches': 'equal_to',
        'not': 'not', 'different': 'not_equal', 'unequal': 'not_equal',

        # logical
        'also': 'and', 'both': 'and', 'either': 'or',
        'otherwise': 'else', 'alternatively': 'else',

        # loops
        'repeat': 'while', 'loop': 'while', 'iterate': 'for',

        # increment / decrement
        'increase': 'increment', 'raise': 'increment', 'grow': 'increment',
        'decrease': 'decrement', 'reduce': 'decrement', 'shrink': 'decrement',
        'lower': 'decrement',

        # functions
        'function': 'function', 'func': 'function', 'method': 'function',
        'procedure': 'function', 'routine': 'function', 'subroutine': 'function',
        'invoke': 'call', 'execute': 'call', 'run': 'call',
        'give': 'return', 'send': 'return', 'respond': 'return',

        # lists
        'array': 'list', 'collection': 'list',
        'push': 'append', 'insert': 'append',

        # comments
        'note': 'comment', 'remark': 'comment',

        # store
        'save': 'store', 'keep': 'store', 'place': 'store', 'put': 'store',

        # directional words (kept as-is)
        'to': 'to', 'into': 'to', 'in': 'in', 'from': 'from',
        'than': 'than', 'then': 'then', 'do': 'do', 'does': 'do',
    }

    #stop words dropped unless they are also synonym keys
    FILLER_WORDS = frozenset({
        'please', 'the', 'a', 'an', 'is', 'are', 'was', 'were', 'it', 'its',
        'this', 'that', 'these', 'those', 'my', 'your', 'his', 'her', 'our',
        'their', 'should', 'would', 'could', 'can', 'will', 'shall', 'may',
        'might', 'must', 'now', 'just', 'also', 'so', 'very', 'really',
        'actually', 'basically', 'simply', 'named', 'called',
    })

    #canonical keywords recognised by the lexer
    KEYWORDS = frozenset({
        # actions
        'create', 'set', 'print', 'input', 'add', 'subtract', 'multiply',
        'divide', 'modulus', 'increment', 'decrement', 'if', 'else', 'while',
        'for', 'do', 'then', 'define', 'function', 'call', 'return', 'append',
        'comment',
        # comparisons
        'greater', 'less', 'equal_to', 'not', 'not_equal',
        # structures
        'variable', 'list', 'array',
        # directives
        'value', 'to', 'in', 'from', 'than', 'store', 'and', 'or',
        # misc
        'end', 'by', 'with', 'parameter', 'parameters', 'true', 'false',
    })

    ARITHMETIC_OPERATORS = ('add', 'subtract', 'multiply', 'divide', 'modulus')


# =============================================================================
# REGEX TOKEN SPEC (Formal token definitions)
# =============================================================================

QUOTED_RE = re.compile(r'"((?:\\.|[^"\\])*)"|\'((?:\\.|[^\'\\])*)\'')
NUMERIC_LITERAL_RE = re.compile(r'(?<![\w.])-?\d+(?:\.\d+)?(?!\w|\.\d)')
PUNCTUATION_RE = re.compile(r'[^\w\s_]')
UNESCAPED_DQUOTE_RE = re.compile(r'(?<!\\)"')

NUMBER_RE = re.compile(r'^-?\d+(\.\d+)?$')
INTEGER_RE = re.compile(r'^-?\d+$')
DECIMAL_RE = re.compile(r'^-?\d+\.\d+$')
STRING_RE = re.compile(r'^".*"$|^\'.*\'$', re.DOTALL)
IDENTIFIER_RE = re.compile(r'^[a-z_][a-z0-9_]*$', re.IGNORECASE)


#=============================================================================
# PHASE 1: NORMALIZATION
#=============================================================================

def _quote(contents: str) -> str:
    return '"' + UNESCAPED_DQUOTE_RE.sub(r'\\"', contents) + '"'


def _split_literals(text: str, pattern: re.Pattern, render: Callable[[re.Match], str]):
    """Yield (text, is_literal) pieces of `text`, with each match of `pattern` as a literal."""
    last = 0
    for m in pattern.finditer(text):
        yield text[last:m.start()], False
        yield render(m), True
        last = m.end()
    yield text[last:], False


def _pieces(raw: str) -> Iterator[Tuple[str, bool]]:
    #quoted strings first, then numbers in the text between them
    quoted = _split_literals(raw, QUOTED_RE, lambda m: _quote(
        m.group(1) if m.group(1) is not None else m.group(2)
    ))
    for text, is_literal in quoted:
        if is_literal:
            yield text, True
            continue
        yield from _split_literals(text, NUMERIC_LITERAL_RE, lambda m: m.group(0))


def normalize(raw: str) -> str:
    """
    Clean one line of English into a canonical command string.

    Quoted strings and numeric literals are set aside before anything else
    touches the text, so their case, spacing and punctuation survive. The rest
    is lowercased, stripped of punctuation, filtered of filler words, and
    mapped through the synonym table.
    """
    if not isinstance(raw, str) or not raw.strip():
        return ""

    words: List[str] = []
    for text, is_literal in _pieces(raw.strip()):
        if is_literal:
            words.append(text)
            continue
        for w in PUNCTUATION_RE.sub(" ", text.lower()).split():
            if w in Vocabulary.SYNONYMS or w not in Vocabulary.FILLER_WORDS:
                words.append(Vocabulary.SYNONYMS.get(w, w))

    return " ".join(words)


def normalize_numbered_lines(raw: str) -> List[Tuple[int, str]]:
    """Normalize each non-blank line, keeping its 1-based source line number."""
    if not isinstance(raw, str):
        return []
    result = []
    for number, line in enumerate(raw.split("\n"), 1):
        line = line.strip()
        if not line:
            continue
        cleaned = normalize(line)
        if cleaned:
            result.append((number, cleaned))
    return result


def normalize_lines(raw: str) -> List[str]:
    return [cleaned for _number, cleaned in normalize_numbered_lines(raw)]


#=============================================================================
# PHASE 2: LEXICAL ANALYSIS
#=============================================================================

class Lexer:
    def __init__(self, text: str):
        self.text = text if isinstance(text, str) else ""

    def _segments(self) -> List[str]:
        """Split on whitespace, keeping each quoted span as one segment."""
        parts: List[str] = []
        current = ""
        quote = None
        escaped = False

        for ch in self.text:
            if quote:
                current += ch
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == quote:
                    parts.append(current)
                    current = ""
                    quote = None
            elif ch in "\"'":
                if current:
                    parts.append(current)
                current = ch
                quote = ch
            elif ch.isspace():
                if current:
                    parts.append(current)
                current = ""
            else:
                current += ch

        if current:
            parts.append(current)
        return parts

    def _classify(self, word: str) -> Token:
        if STRING_RE.match(word) and len(word) >= 2:
            return Token(TokenType.STRING, word[1:-1])
        if NUMBER_RE.match(word):
            return Token(TokenType.NUMBER, word)
        if word in ('true', 'false'):
            return Token(TokenType.BOOLEAN, word)
        if word in Vocabulary.KEYWORDS:
            return Token(TokenType.KEYWORD, word)
        if IDENTIFIER_RE.match(word):
            return Token(TokenType.IDENTIFIER, word)
        return Token(TokenType.UNKNOWN, word)

    def tokenize(self) -> List[Token]:
        return [self._classify(word) for word in self._segments()]


def tokenize(normalized: str) -> List[Token]:
    return Lexer(normalized).tokenize()


#=============================================================================
# PHASE 3: SYNTAX ANALYSIS (GRAMMAR RULES) + AST GENERATION
#=============================================================================

class ASTNodeType(Enum):
    VARIABLE_CREATION = "variable_creation"
    ASSIGNMENT = "assignment"
    PRINT = "print"
    INPUT = "input"
    ARITHMETIC = "arithmetic"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    IF_STATEMENT = "if_statement"
    WHILE_LOOP = "while_loop"
    FOR_LOOP = "for_loop"
    FUNCTION_DEF = "function_def"
    FUNCTION_CALL = "function_call"
    RETURN = "return"
    LIST_CREATION = "list_creation"
    APPEND = "append"
    COMMENT = "comment"


@dataclass(frozen=True)
class Condition:
    left: str
    operator: str             # greater | less | equal | not_equal
    right: str


@dataclass(frozen=True)
class VariableCreation:
    name: str
    value: Optional[str] = None
    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE_CREATION


@dataclass(frozen=True)
class Assignment:
    name: str
    value: str
    node_type: ClassVar[ASTNodeType] = ASTNodeType.ASSIGNMENT


@dataclass(frozen=True)
class Print:
    values: Tuple[str, ...]
    node_type: ClassVar[ASTNodeType] = ASTNodeType.PRINT


@dataclass(frozen=True)
class Input:
    variable: str
    node_type: ClassVar[ASTNodeType] = ASTNodeType.INPUT


@dataclass(frozen=True)
class Arithmetic:
    operator: str
    left: str
    right: str
    result: Optional[str] = None
    node_type: ClassVar[ASTNodeType] = ASTNodeType.ARITHMETIC


@dataclass(frozen=True)
class Increment:
    variable: str
    amount: str = "1"
    node_type: ClassVar[ASTNodeType] = ASTNodeType.INCREMENT


@dataclass(frozen=True)
class Decrement:
    variable: str
    amount: str = "1"
    node_type: ClassVar[ASTNodeType] = ASTNodeType.DECREMENT


@dataclass(frozen=True)
class IfStatement:
    condition: Condition
    then_body: Optional['ASTNode'] = None
    else_body: Optional['ASTNode'] = None
    node_type: ClassVar[ASTNodeType] = ASTNodeType.IF_STATEMENT


@dataclass(frozen=True)
class WhileLoop:
    condition: Condition
    body: Optional['ASTNode'] = None
    node_type: ClassVar[ASTNodeType] = ASTNodeType.WHILE_LOOP


@dataclass(frozen=True)
class ForLoop:
    variable: str
    start: str
    stop: str
    step: str = "1"
    body: Optional['ASTNode'] = None
    node_type: ClassVar[ASTNodeType] = ASTNodeType.FOR_LOOP


@dataclass(frozen=True)
class FunctionDef:
    name: str
    params: Tuple[str, ...] = ()
    body: Optional['ASTNode'] = None
    node_type: ClassVar[ASTNodeType] = ASTNodeType.FUNCTION_DEF


@dataclass(frozen=True)
class FunctionCall:
    name: str
    args: Tuple[str, ...] = ()
    node_type: ClassVar[ASTNodeType] = ASTNodeType.FUNCTION_CALL


@dataclass(frozen=True)
class Return:
    value: Optional[str] = None
    node_type: ClassVar[ASTNodeType] = ASTNodeType.RETURN


@dataclass(frozen=True)
class ListCreation:
    name: str
    values: Tuple[str, ...] = ()
    node_type: ClassVar[ASTNodeType] = ASTNodeType.LIST_CREATION


@dataclass(frozen=True)
class Append:
    list_name: str
    value: str
    node_type: ClassVar[ASTNodeType] = ASTNodeType.APPEND


@dataclass(frozen=True)
class Comment:
    text: str
    node_type: ClassVar[ASTNodeType] = ASTNodeType.COMMENT


ASTNode = Union[
    VariableCreation, Assignment, Print, Input, Arithmetic, Increment,
    Decrement, IfStatement, WhileLoop, ForLoop, FunctionDef, FunctionCall,
    Return, ListCreation, Append, Comment,
]

BODY_SLOTS = ('body', 'then_body', 'else_body')

#python field name -> serialized key
_JSON_KEYS = {
    'then_body': 'thenBody',
    'else_body': 'elseBody',
    'list_name': 'list',
    'start': 'from',
    'stop': 'to',
}


def node_to_dict(node) -> Optional[dict]:
    """Convert an AST node to a JSON-serializable dict."""
    if node is None:
        return None
    node_type = getattr(node, 'node_type', None)
    d = {'type': node_type.value if isinstance(node_type, ASTNodeType) else type(node).__name__}
    for f in fields(node):
        value = getattr(node, f.name)
        key = _JSON_KEYS.get(f.name, f.name)
        if f.name in BODY_SLOTS:
            if value is not None:
                d[key] = node_to_dict(value)
        elif isinstance(value, Condition):
            d[key] = {'left': value.left, 'operator': value.operator, 'right': value.right}
        elif isinstance(value, tuple):
            d[key] = list(value)
        else:
            d[key] = value
    return d


def iter_nodes(nodes) -> Iterator:
    """Yield every node in the given trees, parents before their bodies."""
    for node in nodes:
        if node is None:
            continue
        yield node
        yield from iter_nodes(getattr(node, slot, None) for slot in BODY_SLOTS)


@dataclass(frozen=True)
class RuleMatch:
    """A matched command: the node plus the raw body spans still to be parsed."""
    node: ASTNode
    spans: Dict[str, Tuple[Token, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class GrammarRule:
    name: str
    match: Callable[[Sequence[Token]], Optional[RuleMatch]]


def _at(tokens: Sequence[Token], i: int) -> Optional[Token]:
    return tokens[i] if 0 <= i < len(tokens) else None


def _is_kw(token: Optional[Token], *words: str) -> bool:
    return token is not None and token.type == TokenType.KEYWORD and token.value in words


def _is_id(token: Optional[Token]) -> bool:
    return token is not None and token.type == TokenType.IDENTIFIER


def _is_value(token: Optional[Token]) -> bool:
    return token is not None and token.type in (
        TokenType.NUMBER, TokenType.STRING, TokenType.IDENTIFIER, TokenType.BOOLEAN
    )


def _val(token: Token) -> str:
    # strings carry their quotes from here on
    return token.source()


def parse_condition(tokens: Sequence[Token], start: int) -> Optional[Tuple[Condition, int]]:
    """
    Grammar:
      CONDITION  -> VALUE COMPARATOR VALUE
      COMPARATOR -> not (equal_to | value (to)?) | not_equal (to)?
                  | greater (than)? | less (than)? | equal_to | value (to)?

    Returns the condition and the index of the first unconsumed token.
    """
    i = start
    if not _is_value(_at(tokens, i)):
        return None
    left = _val(tokens[i])
    i += 1

    negated = _is_kw(_at(tokens, i), 'not')
    if negated:
        i += 1

    # "is equal to" arrives here as "value to"
    if _is_kw(_at(tokens, i), 'equal_to'):
        operator = 'not_equal' if negated else 'equal'
        i += 1
    elif _is_kw(_at(tokens, i), 'value'):
        operator = 'not_equal' if negated else 'equal'
        i += 1
        if _is_kw(_at(tokens, i), 'to'):
            i += 1
    elif negated:
        return None
    elif _is_kw(_at(tokens, i), 'not_equal'):
        operator = 'not_equal'
        i += 1
        if _is_kw(_at(tokens, i), 'to'):
            i += 1
    elif _is_kw(_at(tokens, i), 'greater', 'less'):
        operator = tokens[i].value
        i += 1
        if _is_kw(_at(tokens, i), 'than'):
            i += 1
    else:
        return None

    if not _is_value(_at(tokens, i)):
        return None
    right = _val(tokens[i])
    return Condition(left, operator, right), i + 1


def _match_comment(tokens):
    if len(tokens) >= 2 and _is_kw(tokens[0], 'comment'):
        return RuleMatch(Comment(" ".join(t.value for t in tokens[1:])))
    return None


def _match_list_creation(tokens):
    if not (_is_kw(_at(tokens, 0), 'create') and _is_kw(_at(tokens, 1), 'list')):
        return None
    if not _is_id(_at(tokens, 2)):
        return None
    start = 4 if _is_kw(_at(tokens, 3), 'value') else 3
    values = tuple(_val(t) for t in tokens[start:] if _is_value(t))
    return RuleMatch(ListCreation(tokens[2].value, values))


def _match_append(tokens):
    if len(tokens) < 4 or not _is_kw(tokens[0], 'append') or not _is_value(tokens[1]):
        return None
    for i in range(2, len(tokens) - 1):
        if _is_kw(tokens[i], 'to'):
            target = tokens[i + 1]
            if not _is_id(target):
                return None
            return RuleMatch(Append(target.value, _val(tokens[1])))
    return None


def _match_function_def(tokens):
    # 'define' is rewritten to 'create' by the synonym table
    if not (_is_kw(_at(tokens, 0), 'define', 'create') and _is_kw(_at(tokens, 1), 'function')):
        return None
    if not _is_id(_at(tokens, 2)):
        return None

    params = []
    i = 3
    if _is_kw(_at(tokens, i), 'parameter', 'parameters'):
        i += 1
        while _is_id(_at(tokens, i)):
            params.append(tokens[i].value)
            i += 1
    if _is_kw(_at(tokens, i), 'do'):
        i += 1

    node = FunctionDef(tokens[2].value, tuple(params))
    return RuleMatch(node, {'body': tuple(tokens[i:])})


def _match_function_call(tokens):
    if not _is_kw(_at(tokens, 0), 'call') or not _is_id(_at(tokens, 1)):
        return None
    start = 3 if _is_kw(_at(tokens, 2), 'value') else 2
    args = tuple(_val(t) for t in tokens[start:] if _is_value(t))
    return RuleMatch(FunctionCall(tokens[1].value, args))


def _match_return(tokens):
    if not _is_kw(_at(tokens, 0), 'return'):
        return None
    value = _at(tokens, 1)
    return RuleMatch(Return(_val(value) if _is_value(value) else None))


def _match_for_loop(tokens):
    if not _is_kw(_at(tokens, 0), 'for') or not _is_id(_at(tokens, 1)):
        return None

    bounds: Dict[str, str] = {}
    body_start = len(tokens)
    i = 2
    while i < len(tokens):
        token = tokens[i]
        if _is_kw(token, 'from', 'to', 'by'):
            nxt = _at(tokens, i + 1)
            if not _is_value(nxt):
                return None
            bounds[token.value] = _val(nxt)
            i += 2
            continue
        if _is_kw(token, 'do'):
            body_start = i + 1
            break
        i += 1

    if 'from' not in bounds or 'to' not in bounds:
        return None
    node = ForLoop(tokens[1].value, bounds['from'], bounds['to'], bounds.get('by', '1'))
    return RuleMatch(node, {'body': tuple(tokens[body_start:])})


def _match_while_loop(tokens):
    if not _is_kw(_at(tokens, 0), 'while'):
        return None
    parsed = parse_condition(tokens, 1)
    if parsed is None:
        return None
    condition, i = parsed
    if _is_kw(_at(tokens, i), 'do'):
        i += 1
    return RuleMatch(WhileLoop(condition), {'body': tuple(tokens[i:])})


def _match_if_statement(tokens):
    if not _is_kw(_at(tokens, 0), 'if'):
        return None
    parsed = parse_condition(tokens, 1)
    if parsed is None:
        return None
    condition, then_start = parsed
    if _is_kw(_at(tokens, then_start), 'then'):
        then_start += 1

    else_index = next(
        (i for i in range(then_start, len(tokens)) if _is_kw(tokens[i], 'else')), None
    )
    if else_index is None:
        spans = {'then_body': tuple(tokens[then_start:]), 'else_body': ()}
    else:
        spans = {
            'then_body': tuple(tokens[then_start:else_index]),
            'else_body': tuple(tokens[else_index + 1:]),
        }
    return RuleMatch(IfStatement(condition), spans)


def _match_arithmetic(tokens):
    if not _is_kw(_at(tokens, 0), *Vocabulary.ARITHMETIC_OPERATORS):
        return None
    if not _is_value(_at(tokens, 1)):
        return None
    left = _val(tokens[1])
    right = None
    result = None

    i = 2
    while i < len(tokens):
        token = tokens[i]
        if _is_kw(token, 'and') and _is_value(_at(tokens, i + 1)):
            right = _val(tokens[i + 1])
            i += 2
            continue
        if _is_kw(token, 'store', 'in'):
            result = next((t.value for t in tokens[i + 1:] if _is_id(t)), None)
            break
        if right is None and _is_value(token):
            right = _val(token)
        i += 1

    if right is None:
        return None
    return RuleMatch(Arithmetic(tokens[0].value, left, right, result))


def _counter_rule(keyword: str, node_class):
    def match(tokens):
        if not _is_kw(_at(tokens, 0), keyword) or not _is_id(_at(tokens, 1)):
            return None
        amount = '1'
        if _is_kw(_at(tokens, 2), 'by') and _is_value(_at(tokens, 3)):
            amount = _val(tokens[3])
        return RuleMatch(node_class(tokens[1].value, amount))
    return match


def _match_input(tokens):
    if _is_kw(_at(tokens, 0), 'input') and _is_id(_at(tokens, 1)):
        return RuleMatch(Input(tokens[1].value))
    return None


def _match_variable_creation(tokens):
    if not _is_kw(_at(tokens, 0), 'create'):
        return None
    i = 2 if _is_kw(_at(tokens, 1), 'variable') else 1
    if not _is_id(_at(tokens, i)):
        return None
    name = tokens[i].value
    i += 1
    if _is_kw(_at(tokens, i), 'value'):
        i += 1
    if _is_kw(_at(tokens, i), 'to'):
        i += 1
    value = _at(tokens, i)
    if value is None:
        return RuleMatch(VariableCreation(name, None))
    # anything else where the value belongs is not this command
    if not _is_value(value):
        return None
    return RuleMatch(VariableCreation(name, _val(value)))


def _match_assignment(tokens):
    if not _is_kw(_at(tokens, 0), 'set') or not _is_id(_at(tokens, 1)):
        return None
    i = 3 if _is_kw(_at(tokens, 2), 'to', 'value') else 2
    if _is_kw(_at(tokens, i), 'to'):
        i += 1
    if not _is_value(_at(tokens, i)):
        return None
    return RuleMatch(Assignment(tokens[1].value, _val(tokens[i])))


def _match_print(tokens):
    if not _is_kw(_at(tokens, 0), 'print'):
        return None
    values = tuple(_val(t) for t in tokens[1:] if _is_value(t))
    if not values:
        return None
    return RuleMatch(Print(values))


#ordered by specificity (most specific first); the first match wins
GRAMMAR_RULES: Tuple[GrammarRule, ...] = (
    GrammarRule('comment', _match_comment),
    GrammarRule('list_creation', _match_list_creation),
    GrammarRule('append', _match_append),
    GrammarRule('function_def', _match_function_def),
    GrammarRule('function_call', _match_function_call),
    GrammarRule('return', _match_return),
    GrammarRule('for_loop', _match_for_loop),
    GrammarRule('while_loop', _match_while_loop),
    GrammarRule('if_statement', _match_if_statement),
    GrammarRule('arithmetic', _match_arithmetic),
    GrammarRule('increment', _counter_rule('increment', Increment)),
    GrammarRule('decrement', _counter_rule('decrement', Decrement)),
    GrammarRule('input', _match_input),
    GrammarRule('variable_creation', _match_variable_creation),
    GrammarRule('assignment', _match_assignment),
    GrammarRule('print', _match_print),
)

EXAMPLE_PATTERNS = (
    'create variable x value 10',
    'print x',
    'if x greater than 5 then print x',
)


#=============================================================================
# PHASE 4: PARSING (rule dispatch + recursive bodies)
#=============================================================================

@dataclass
class ParseResult:
    success: bool
    node: Optional[ASTNode] = None
    error: Optional[str] = None
    code: Optional[str] = None
    rule: Optional[str] = None
    warnings: List[CompileError] = field(default_factory=list)


class Parser:
    def __init__(self, rules: Sequence[GrammarRule] = GRAMMAR_RULES):
        self.rules = tuple(rules)

    def parse(self, tokens: Sequence[Token]) -> ParseResult:
        """
        Try each rule in priority order on the full token sequence; on the
        first match, parse the captured body spans recursively.

        A body span that fails to parse leaves its slot empty and records a
        SYN010 warning; the command itself still succeeds.
        """
        if not tokens:
            return ParseResult(False, error="Empty input", code="SYN002")

        for rule in self.rules:
            matched = rule.match(tokens)
            if matched is None:
                continue

            node = matched.node
            warnings: List[CompileError] = []
            for slot, span in matched.spans.items():
                if not span:
                    continue
                child = self.parse(span)
                warnings.extend(child.warnings)
                if child.success:
                    node = replace(node, **{slot: child.node})
                else:
                    text = " ".join(t.source() for t in span)
                    warnings.append(CompileError(
                        "SYN010",
                        f"Could not parse {slot.replace('_', ' ')} \"{text}\"; treated as empty",
                        context=text,
                    ))
            return ParseResult(True, node=node, rule=rule.name, warnings=warnings)

        text = " ".join(t.source() for t in tokens)
        hint = ", ".join(f'"{p}"' for p in EXAMPLE_PATTERNS)
        return ParseResult(
            False,
            error=f'Unrecognized command: "{text}".\nTry patterns like: {hint}',
            code="SYN001",
        )


_DEFAULT_PARSER = Parser()


def parse(tokens: Sequence[Token]) -> ParseResult:
    return _DEFAULT_PARSER.parse(tokens)


def parse_line(normalized: str) -> ParseResult:
    return parse(tokenize(normalized))


#=============================================================================
# PHASE 5: CODE GENERATION
#=============================================================================

class TargetLanguage(Enum):
    PYTHON = "python"
    JAVA = "java"
    CPP = "cpp"

    @classmethod
    def from_name(cls, name) -> 'TargetLanguage':
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = {'c++': 'cpp', 'py': 'python'}.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(lang.value for lang in cls)
            raise ValueError(f"Unsupported language: {name!r}. Choose one of: {choices}") from None


PY, JAVA, CPP = TargetLanguage.PYTHON, TargetLanguage.JAVA, TargetLanguage.CPP

LITERALS = {
    PY: {'true': 'True', 'false': 'False', 'null': 'None'},
    JAVA: {'true': 'true', 'false': 'false', 'null': '0'},
    CPP: {'true': 'true', 'false': 'false', 'null': '0'},
}

COMPARISON_OPS = {
    'greater': {PY: '>', JAVA: '>', CPP: '>'},
    'less': {PY: '<', JAVA: '<', CPP: '<'},
    'equal': {PY: '==', JAVA: '==', CPP: '=='},
    'not_equal': {PY: '!=', JAVA: '!=', CPP: '!='},
}

ARITHMETIC_OPS = {
    'add': {PY: '+', JAVA: '+', CPP: '+'},
    'subtract': {PY: '-', JAVA: '-', CPP: '-'},
    'multiply': {PY: '*', JAVA: '*', CPP: '*'},
    'divide': {PY: '/', JAVA: '/', CPP: '/'},
    'modulus': {PY: '%', JAVA: '%', CPP: '%'},
}

#inferred type -> declared type (statically typed targets only)
TYPE_NAMES = {
    JAVA: {'string': 'String', 'int': 'int', 'double': 'double', 'bool': 'boolean', 'auto': 'var'},
    CPP: {'string': 'std::string', 'int': 'int', 'double': 'double', 'bool': 'bool', 'auto': 'auto'},
}

#java collections hold boxed types
BOXED_TYPE_NAMES = {
    'string': 'String', 'int': 'Integer', 'double': 'Double', 'bool': 'Boolean', 'auto': 'Object',
}

NOOP = {PY: 'pass', JAVA: ';', CPP: ';'}
COMMENT_PREFIX = {PY: '#', JAVA: '//', CPP: '//'}
TERMINATOR = {PY: '', JAVA: ';', CPP: ';'}


def infer_type(value: Optional[str]) -> str:
    """Static type of a literal by its shape: string, int, double, bool or auto."""
    if value is None:
        return 'auto'
    if value in ('true', 'false'):
        return 'bool'
    if STRING_RE.match(value):
        return 'string'
    if INTEGER_RE.match(value):
        return 'int'
    if DECIMAL_RE.match(value):
        return 'double'
    return 'auto'


def format_value(value: Optional[str], language: TargetLanguage) -> str:
    literals = LITERALS[language]
    if value is None:
        return literals['null']
    if value in ('true', 'false'):
        return literals[value]
    return value


def indent(code: str, level: int = 1, unit: str = "    ") -> str:
    prefix = unit * level
    return "\n".join(prefix + line if line.strip() else line for line in code.split("\n"))


class CodeGenerator:
    """
    Renders AST nodes into source text for one target language.

    Adding a target means one more entry in each table above plus one branch
    in the templates whose shape differs between languages.
    """

    def __init__(self, language=TargetLanguage.PYTHON):
        self.language = TargetLanguage.from_name(language)
        self._renderers = {
            ASTNodeType.VARIABLE_CREATION: self._gen_variable_creation,
            ASTNodeType.ASSIGNMENT: self._gen_assignment,
            ASTNodeType.PRINT: self._gen_print,
            ASTNodeType.INPUT: self._gen_input,
            ASTNodeType.ARITHMETIC: self._gen_arithmetic,
            ASTNodeType.INCREMENT: self._gen_increment,
            ASTNodeType.DECREMENT: self._gen_decrement,
            ASTNodeType.IF_STATEMENT: self._gen_if_statement,
            ASTNodeType.WHILE_LOOP: self._gen_while_loop,
            ASTNodeType.FOR_LOOP: self._gen_for_loop,
            ASTNodeType.FUNCTION_DEF: self._gen_function_def,
            ASTNodeType.FUNCTION_CALL: self._gen_function_call,
            ASTNodeType.RETURN: self._gen_return,
            ASTNodeType.LIST_CREATION: self._gen_list_creation,
            ASTNodeType.APPEND: self._gen_append,
            ASTNodeType.COMMENT: self._gen_comment,
        }

    # ---------- helpers ----------

    @property
    def is_python(self) -> bool:
        return self.language is TargetLanguage.PYTHON

    def _value(self, value: Optional[str]) -> str:
        return format_value(value, self.language)

    def _stmt(self, text: str) -> str:
        return text + TERMINATOR[self.language]

    def _condition(self, condition: Condition) -> str:
        op = COMPARISON_OPS[condition.operator][self.language]
        return f"{self._value(condition.left)} {op} {self._value(condition.right)}"

    def _body(self, node) -> str:
        code = self.generate(node)
        return code if code else NOOP[self.language]

    def _block(self, header: str, body) -> str:
        if self.is_python:
            return f"{header}:\n{indent(self._body(body))}"
        return f"{header} {{\n{indent(self._body(body))}\n}}"

    # ---------- statements ----------

    def _gen_variable_creation(self, node: VariableCreation) -> str:
        value = self._value(node.value)
        if self.is_python:
            return f"{node.name} = {value}"
        type_name = TYPE_NAMES[self.language][infer_type(node.value)]
        return f"{type_name} {node.name} = {value};"

    def _gen_assignment(self, node: Assignment) -> str:
        return self._stmt(f"{node.name} = {self._value(node.value)}")

    def _gen_print(self, node: Print) -> str:
        values = [self._value(v) for v in node.values]
        if self.language is TargetLanguage.PYTHON:
            return "print(" + ", ".join(values) + ")"
        if self.language is TargetLanguage.JAVA:
            return "System.out.println(" + ' + " " + '.join(values) + ");"
        return "std::cout << " + ' << " " << '.join(values) + " << std::endl;"

    def _gen_input(self, node: Input) -> str:
        if self.language is TargetLanguage.PYTHON:
            return f"{node.variable} = input()"
        if self.language is TargetLanguage.JAVA:
            return f"{node.variable} = scanner.nextLine();"
        return f"std::cin >> {node.variable};"

    def _gen_arithmetic(self, node: Arithmetic) -> str:
        op = ARITHMETIC_OPS[node.operator][self.language]
        expr = f"{self._value(node.left)} {op} {self._value(node.right)}"
        if node.result:
            return self._stmt(f"{node.result} = {expr}")
        return self._stmt(expr)

    def _counter(self, variable: str, amount: str, op: str) -> str:
        if amount == '1' and not self.is_python:
            return f"{variable}{op}{op};"
        return self._stmt(f"{variable} {op}= {self._value(amount)}")

    def _gen_increment(self, node: Increment) -> str:
        return self._counter(node.variable, node.amount, '+')

    def _gen_decrement(self, node: Decrement) -> str:
        return self._counter(node.variable, node.amount, '-')

    def _gen_if_statement(self, node: IfStatement) -> str:
        cond = self._condition(node.condition)
        header = f"if {cond}" if self.is_python else f"if ({cond})"
        code = self._block(header, node.then_body)
        if node.else_body is not None:
            if self.is_python:
                code += "\n" + self._block("else", node.else_body)
            else:
                code += " " + self._block("else", node.else_body)
        return code

    def _gen_while_loop(self, node: WhileLoop) -> str:
        cond = self._condition(node.condition)
        header = f"while {cond}" if self.is_python else f"while ({cond})"
        return self._block(header, node.body)

    def _gen_for_loop(self, node: ForLoop) -> str:
        start, stop, step = (self._value(v) for v in (node.start, node.stop, node.step))
        if self.is_python:
            args = f"{start}, {stop}" if node.step == '1' else f"{start}, {stop}, {step}"
            return self._block(f"for {node.variable} in range({args})", node.body)

        var = node.variable
        if node.step == '1':
            compare, update = '<', f"{var}++"
        elif node.step == '-1':
            compare, update = '>', f"{var}--"
        elif node.step.startswith('-') and NUMBER_RE.match(node.step):
            compare, update = '>', f"{var} -= {node.step[1:]}"
        else:
            compare, update = '<', f"{var} += {step}"
        header = f"for (int {var} = {start}; {var} {compare} {stop}; {update})"
        return self._block(header, node.body)

    def _gen_function_def(self, node: FunctionDef) -> str:
        returns_value = any(
            isinstance(n, Return) and n.value is not None for n in iter_nodes([node.body])
        )
        if self.language is TargetLanguage.PYTHON:
            header = f"def {node.name}({', '.join(node.params)})"
        elif self.language is TargetLanguage.JAVA:
            params = ", ".join(f"Object {p}" for p in node.params)
            ret = "Object" if returns_value else "void"
            header = f"public static {ret} {node.name}({params})"
        else:
            params = ", ".join(f"auto {p}" for p in node.params)
            ret = "auto" if returns_value else "void"
            header = f"{ret} {node.name}({params})"
        return self._block(header, node.body)

    def _gen_function_call(self, node: FunctionCall) -> str:
        args = ", ".join(self._value(a) for a in node.args)
        return self._stmt(f"{node.name}({args})")

    def _gen_return(self, node: Return) -> str:
        if node.value is None:
            return self._stmt("return")
        return self._stmt(f"return {self._value(node.value)}")

    def _gen_list_creation(self, node: ListCreation) -> str:
        values = ", ".join(self._value(v) for v in node.values)
        kinds = {infer_type(v) for v in node.values}
        element = kinds.pop() if len(kinds) == 1 else 'auto'

        if self.language is TargetLanguage.PYTHON:
            return f"{node.name} = [{values}]"
        if self.language is TargetLanguage.JAVA:
            boxed = BOXED_TYPE_NAMES[element]
            if not node.values:
                return f"ArrayList<{boxed}> {node.name} = new ArrayList<>();"
            return f"ArrayList<{boxed}> {node.name} = new ArrayList<>(Arrays.asList({values}));"
        if element == 'auto':
            if not node.values:
                return f"std::vector<int> {node.name};"
            # class template argument deduction picks the element type
            return f"std::vector {node.name} = {{{values}}};"
        return f"std::vector<{TYPE_NAMES[CPP][element]}> {node.name} = {{{values}}};"

    def _gen_append(self, node: Append) -> str:
        value = self._value(node.value)
        if self.language is TargetLanguage.PYTHON:
            return f"{node.list_name}.append({value})"
        if self.language is TargetLanguage.JAVA:
            return f"{node.list_name}.add({value});"
        return f"{node.list_name}.push_back({value});"

    def _gen_comment(self, node: Comment) -> str:
        return f"{COMMENT_PREFIX[self.language]} {node.text}"

    # ---------- entry points ----------

    def generate(self, node) -> str:
        """Render one statement (compound statements include their bodies)."""
        if node is None:
            return ""
        node_type = getattr(node, 'node_type', None)
        renderer = self._renderers.get(node_type)
        if renderer is None:
            name = node_type.value if isinstance(node_type, ASTNodeType) else type(node).__name__
            return f"{COMMENT_PREFIX[self.language]} Unsupported node type: {name}"
        return renderer(node)

    def generate_program(self, nodes: Sequence) -> str:
        """
        Render a whole program: function definitions first, then the other
        statements, with imports and an entry point where the target needs
        them.
        """
        nodes = [n for n in nodes if n is not None]
        if not nodes:
            return ""

        functions = [n for n in nodes if getattr(n, 'node_type', None) is ASTNodeType.FUNCTION_DEF]
        statements = [n for n in nodes if getattr(n, 'node_type', None) is not ASTNodeType.FUNCTION_DEF]
        used = {getattr(n, 'node_type', None) for n in iter_nodes(nodes)}

        if self.language is TargetLanguage.JAVA:
            return self._java_program(nodes, functions, statements, used)
        if self.language is TargetLanguage.CPP:
            return self._cpp_program(nodes, functions, statements, used)

        sections = []
        if functions:
            sections.append("\n\n".join(self.generate(f) for f in functions))
        if statements:
            sections.append("\n".join(self.generate(s) for s in statements))
        return "\n\n".join(sections)

    def _java_program(self, nodes, functions, statements, used) -> str:
        needs_scanner = ASTNodeType.INPUT in used
        lists = [n for n in iter_nodes(nodes) if isinstance(n, ListCreation)]

        lines = []
        if needs_scanner:
            lines.append("import java.util.Scanner;")
        if lists:
            lines.append("import java.util.ArrayList;")
        if any(n.values for n in lists):
            lines.append("import java.util.Arrays;")
        if lines:
            lines.append("")

        lines.append("public class Main {")
        for f in functions:
            lines.append(indent(self.generate(f), 1))
            lines.append("")
        lines.append("    public static void main(String[] args) {")
        if needs_scanner:
            lines.append(indent("Scanner scanner = new Scanner(System.in);", 2))
        for s in statements:
            lines.append(indent(self.generate(s), 2))
        lines.append("    }")
        lines.append("}")
        return "\n".join(lines)

    def _cpp_program(self, nodes, functions, statements, used) -> str:
        includes = []
        if used & {ASTNodeType.PRINT, ASTNodeType.INPUT}:
            includes.append("#include <iostream>")
        if used & {ASTNodeType.LIST_CREATION, ASTNodeType.APPEND}:
            includes.append("#include <vector>")
        if self._uses_strings(nodes):
            includes.append("#include <string>")

        lines = list(includes)
        if lines:
            lines.append("")
        for f in functions:
            lines.append(self.generate(f))
            lines.append("")
        lines.append("int main() {")
        for s in statements:
            lines.append(indent(self.generate(s), 1))
        lines.append("    return 0;")
        lines.append("}")
        return "\n".join(lines)

    @staticmethod
    def _uses_strings(nodes) -> bool:
        for n in iter_nodes(nodes):
            if isinstance(n, (VariableCreation, Assignment)) and infer_type(n.value) == 'string':
                return True
            if isinstance(n, ListCreation) and any(infer_type(v) == 'string' for v in n.values):
                return True
        return False


def generate(node, language=TargetLanguage.PYTHON) -> str:
    return CodeGenerator(language).generate(node)


def generate_program(nodes: Sequence, language=TargetLanguage.PYTHON) -> str:
    return CodeGenerator(language).generate_program(nodes)


#=============================================================================
# MAIN INTERFACE
#=============================================================================

EXAMPLE_COMMANDS = (
    {'title': 'Hello World', 'code': 'print "Hello World"'},
    {
        'title': 'Variables & Math',
        'code': "create variable x value 10\ncreate variable y value 20\n"
                "add x and y store in result\nprint result",
    },
    {
        'title': 'If-Else Logic',
        'code': 'create variable age value 18\n'
                'if age greater than 17 then print "Adult" else print "Minor"',
    },
    {
        'title': 'While Loop',
        'code': "create variable counter value 0\n"
                "while counter less than 5 do increment counter\nprint counter",
    },
    {'title': 'For Loop', 'code': 'for i from 1 to 11 do print i'},
    {'title': 'Function', 'code': 'define function greet do print "Hello!"\ncall greet'},
    {
        'title': 'List Operations',
        'code': "create list numbers values 1 2 3 4 5\nappend 6 to numbers\nprint numbers",
    },
    {
        'title': 'Full Program',
        'code': "comment A simple calculator\ncreate variable first value 15\n"
                "create variable second value 7\nadd first and second store in total\n"
                "subtract first and second store in diff\n"
                "multiply first and second store in prod\n"
                "print total\nprint diff\nprint prod",
    },
)


class Translator:
    """
    Runs the whole pipeline: normalize -> tokenize -> parse -> generate.

    Holds no state between calls beyond its settings; with debug on, each
    phase is traced to `stream` (stdout by default).
    """

    def __init__(self, debug: bool = False, stream=None):
        self.debug = debug
        self.stream = stream
        self.parser = Parser()

    def _trace(self, *args):
        if self.debug:
            print(*args, file=self.stream or sys.stdout)

    def _banner(self, title: str):
        self._trace("\n" + "-" * 70)
        self._trace(title)
        self._trace("-" * 70)

    def _trace_tokens(self, tokens: Sequence[Token]):
        for num, token in enumerate(tokens):
            self._trace(f"    Token {num:2d}: {token.type.value:12s} | Value: '{token.value}'")

    def translate_line(self, raw: str, language='python') -> dict:
        """
        Translate a single command.
        Returns: {'success': True, 'code', 'ast', 'warnings'} or
                 {'success': False, 'error'}
        """
        try:
            target = TargetLanguage.from_name(language)
        except ValueError as e:
            return {'success': False, 'error': str(e)}

        cleaned = normalize(raw)
        self._banner("PHASE 1: NORMALIZATION")
        self._trace(f"  '{raw}' -> '{cleaned}'")
        if not cleaned:
            return {'success': False, 'error': 'Empty input'}

        tokens = tokenize(cleaned)
        self._banner("PHASE 2: LEXICAL ANALYSIS (Tokenization)")
        self._trace_tokens(tokens)
        if not tokens:
            return {'success': False, 'error': 'No tokens found'}

        result = self.parser.parse(tokens)
        self._banner("PHASE 3: SYNTAX ANALYSIS (Parsing & AST Generation)")
        if not result.success:
            self._trace(f"  ❌ {result.error}")
            return {'success': False, 'error': result.error}
        if self.debug:
            self.print_ast_pretty(result.node)

        code = CodeGenerator(target).generate(result.node)
        self._banner(f"PHASE 4: CODE GENERATION ({target.value})")
        self._trace(code)

        return {
            'success': True,
            'code': code,
            'ast': result.node,
            'warnings': [w.to_dict() for w in result.warnings],
        }

    def translate_program(self, raw: str, language='python') -> dict:
        """
        Translate multi-line input into a full program. Lines that fail are
        collected in 'errors'; the translation succeeds if any line parsed.
        """
        reporter = ErrorReporter(raw if isinstance(raw, str) else "")
        try:
            target = TargetLanguage.from_name(language)
        except ValueError as exc:
            reporter.add("GEN001", str(exc))
            return {'success': False, 'errors': [e.to_dict() for e in reporter.errors],
                    'warnings': [], 'totalTokens': 0}

        if self.debug:
            self._trace("\n" + "=" * 70)
            self._trace("DEBUG MODE - TRANSLATION PROCESS")
            self._trace("=" * 70)
            self._trace(f"\nTarget language: {target.value}")

        lines = normalize_numbered_lines(raw)
        self._banner("PHASE 1: NORMALIZATION")
        for number, cleaned in lines:
            self._trace(f"  Line {number:2d}: {cleaned}")

        if not lines:
            reporter.add("NRM001", "Empty input")
            return {'success': False, 'errors': [e.to_dict() for e in reporter.errors],
                    'warnings': [], 'totalTokens': 0}

        nodes = []
        line_numbers = []
        total_tokens = 0

        self._banner("PHASE 2-3: LEXICAL + SYNTAX ANALYSIS")
        for number, cleaned in lines:
            tokens = tokenize(cleaned)
            total_tokens += len(tokens)
            self._trace(f"\n  Line {number}: {len(tokens)} tokens")
            self._trace_tokens(tokens)

            result = self.parser.parse(tokens)
            for warning in result.warnings:
                reporter.warn(warning, number)
            if result.success:
                nodes.append(result.node)
                line_numbers.append(number)
                if self.debug:
                    self.print_ast_pretty(result.node, prefix="    ")
            else:
                reporter.add(result.code or "SYN001", result.error, number, cleaned)
                self._trace(f"    ❌ {result.error}")

        self._trace(f"\n  Total tokens: {total_tokens}")
        if self.debug:
            reporter.print(self.stream)

        errors = [e.to_dict() for e in reporter.errors]
        warnings = [w.to_dict() for w in reporter.warnings]
        if not nodes:
            return {'success': False, 'errors': errors, 'warnings': warnings,
                    'totalTokens': total_tokens}

        code = CodeGenerator(target).generate_program(nodes)
        self._banner(f"PHASE 4: CODE GENERATION ({target.value})")
        self._trace(code)

        if self.debug:
            self._trace("\n" + "=" * 70)
            self._trace("TRANSLATION COMPLETE")
            self._trace("=" * 70 + "\n")

        return {
            'success': True,
            'code': code,
            'errors': errors,
            'warnings': warnings,
            'nodes': nodes,
            'lines': line_numbers,
            'totalTokens': total_tokens,
        }

    def print_ast_pretty(self, node, prefix: str = "", is_last: bool = True, label: str = ""):
        connector = "└── " if is_last else "├── "
        node_type = getattr(node, 'node_type', None)

        # Build node label
        text = node_type.value.upper() if isinstance(node_type, ASTNodeType) else type(node).__name__
        details = []
        for f in fields(node):
            if f.name in BODY_SLOTS:
                continue
            value = getattr(node, f.name)
            if isinstance(value, Condition):
                value = f"{value.left} {value.operator} {value.right}"
            elif isinstance(value, tuple):
                value = "[" + ", ".join(value) + "]"
            if value is not None:
                details.append(f"{f.name}={value}")
        if details:
            shown = ", ".join(details)
            if len(shown) > 60:
                shown = shown[:60] + "..."
            text += f" ({shown})"

        self._trace(prefix + connector + (f"{label}: " if label else "") + text)

        # Prepare prefix for children
        child_prefix = prefix + ("    " if is_last else "│   ")
        children = [(slot, getattr(node, slot, None)) for slot in BODY_SLOTS]
        children = [(slot, child) for slot, child in children if child is not None]

        for i, (slot, child) in enumerate(children):
            self.print_ast_pretty(child, child_prefix, i == len(children) - 1, slot)


def main(argv=None):
    """Main command-line interface"""
    args = sys.argv[1:] if argv is None else list(argv)

    # Check for debug mode argument
    debug_mode = '--debug' in args or '-d' in args
    language = 'python'
    paths = []
    i = 0
    while i < len(args):
        if args[i] == '--lang' and i + 1 < len(args):
            language = args[i + 1]
            i += 2
            continue
        if not args[i].startswith('-'):
            paths.append(args[i])
        i += 1

    try:
        language = TargetLanguage.from_name(language).value
    except ValueError as e:
        print(f"❌ ERROR: {e}", file=sys.stderr)
        return 2

    translator = Translator(debug=debug_mode)

    if paths:
        with open(paths[0], encoding='utf-8') as f:
            result = translator.translate_program(f.read(), language)
        for e in result['errors']:
            print(f"❌ Line {e['line']}: {e['error']}", file=sys.stderr)
        for w in result['warnings']:
            print(f"⚠ Line {w['line']}: {w['error']}", file=sys.stderr)
        if not result['success']:
            return 1
        print(result['code'])
        return 0

    print("=" * 70)
    print("ENGLISH TO CODE TRANSLATOR")
    print("=" * 70)
    print()

    if debug_mode:
        print("🔍 DEBUG MODE ENABLED")
        print()

    print("Example translations:")
    print("-" * 70)

    for i, example in enumerate(EXAMPLE_COMMANDS[:3], 1):
        print(f"\nExample {i}: {example['title']}")
        result = translator.translate_program(example['code'], language)
        print(indent(example['code'], 1, "  > "))
        print(indent(result.get('code', ''), 1, "  "))

    print("\n" + "=" * 70)
    print("\nInteractive Mode:")
    print("Commands:")
    print("  <text>      - Translate an English command")
    print("  lang <name> - Switch target language (python, java, cpp)")
    print("  debug on    - Enable debug mode")
    print("  debug off   - Disable debug mode")
    print("  quit        - Exit program")
    print("=" * 70)

    while True:
        try:
            text = input(f"\n{language}> ").strip()
        except EOFError:
            break

        if text.lower() in ['quit', 'exit', 'q']:
            print("Goodbye!")
            break

        if text.lower().startswith('lang '):
            try:
                language = TargetLanguage.from_name(text[5:]).value
                print(f"Target language: {language}")
            except ValueError as e:
                print(f"❌ ERROR: {e}")
            continue

        if text.lower() == 'debug on':
            debug_mode = True
            translator.debug = True
            print("🔍 Debug mode enabled")
            continue

        if text.lower() == 'debug off':
            debug_mode = False
            translator.debug = False
            print("Debug mode disabled")
            continue

        if not text:
            continue

        result = translator.translate_line(text, language)
        if result['success']:
            if not debug_mode:
                print(indent(result['code'], 1, "  "))
            for w in result['warnings']:
                print(f"  ⚠ {w['error']}")
        else:
            print(f"\n❌ ERROR: {result['error']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
