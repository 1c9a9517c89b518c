import pytest

from codewriter import (
    ASTNodeType, Append, Arithmetic, Assignment, CodeGenerator, Comment, Condition,
    Decrement, ForLoop, FunctionCall, FunctionDef, IfStatement, Increment, Input,
    ListCreation, Print, Return, TargetLanguage, VariableCreation, WhileLoop,
    generate, generate_program, infer_type,
)

LANGUAGES = ["python", "java", "cpp"]

SAMPLE_NODES = {
    ASTNodeType.VARIABLE_CREATION: VariableCreation("x", "10"),
    ASTNodeType.ASSIGNMENT: Assignment("x", "20"),
    ASTNodeType.PRINT: Print(("x",)),
    ASTNodeType.INPUT: Input("x"),
    ASTNodeType.ARITHMETIC: Arithmetic("add", "x", "y", "z"),
    ASTNodeType.INCREMENT: Increment("x"),
    ASTNodeType.DECREMENT: Decrement("x", "2"),
    ASTNodeType.IF_STATEMENT: IfStatement(Condition("x", "greater", "1")),
    ASTNodeType.WHILE_LOOP: WhileLoop(Condition("x", "less", "5")),
    ASTNodeType.FOR_LOOP: ForLoop("i", "0", "3"),
    ASTNodeType.FUNCTION_DEF: FunctionDef("f"),
    ASTNodeType.FUNCTION_CALL: FunctionCall("f"),
    ASTNodeType.RETURN: Return(),
    ASTNodeType.LIST_CREATION: ListCreation("nums"),
    ASTNodeType.APPEND: Append("nums", "1"),
    ASTNodeType.COMMENT: Comment("note"),
}


@pytest.mark.parametrize("language", LANGUAGES)
@pytest.mark.parametrize("node_type", list(ASTNodeType))
def test_generation_is_total(node_type, language):
    code = generate(SAMPLE_NODES[node_type], language)
    assert code.strip()
    assert "Unsupported" not in code


# =============================================================================
# Values and types
# =============================================================================

@pytest.mark.parametrize("value, expected", [
    ('"hi"', "string"),
    ("10", "int"),
    ("-4", "int"),
    ("3.5", "double"),
    ("true", "bool"),
    ("y", "auto"),
    (None, "auto"),
])
def test_infer_type(value, expected):
    assert infer_type(value) == expected


@pytest.mark.parametrize("node, python, java, cpp", [
    (VariableCreation("x", "10"), "x = 10", "int x = 10;", "int x = 10;"),
    (VariableCreation("name", '"Bob"'), 'name = "Bob"', 'String name = "Bob";', 'std::string name = "Bob";'),
    (VariableCreation("ratio", "3.5"), "ratio = 3.5", "double ratio = 3.5;", "double ratio = 3.5;"),
    (VariableCreation("flag", "true"), "flag = True", "boolean flag = true;", "bool flag = true;"),
    (VariableCreation("x", "y"), "x = y", "var x = y;", "auto x = y;"),
    (VariableCreation("x"), "x = None", "var x = 0;", "auto x = 0;"),
    (Assignment("done", "false"), "done = False", "done = false;", "done = false;"),
])
def test_variable_rendering(node, python, java, cpp):
    assert generate(node, "python") == python
    assert generate(node, "java") == java
    assert generate(node, "cpp") == cpp


# =============================================================================
# Simple statements
# =============================================================================

def test_print():
    assert generate(Print(("x",)), "python") == "print(x)"
    assert generate(Print(("x",)), "java") == "System.out.println(x);"
    assert generate(Print(("x",)), "cpp") == "std::cout << x << std::endl;"

    node = Print(('"Total:"', "x"))
    assert generate(node, "python") == 'print("Total:", x)'
    assert generate(node, "java") == 'System.out.println("Total:" + " " + x);'
    assert generate(node, "cpp") == 'std::cout << "Total:" << " " << x << std::endl;'


def test_input():
    assert generate(Input("y"), "python") == "y = input()"
    assert generate(Input("y"), "java") == "y = scanner.nextLine();"
    assert generate(Input("y"), "cpp") == "std::cin >> y;"


def test_arithmetic():
    assert generate(Arithmetic("add", "x", "y", "result"), "python") == "result = x + y"
    assert generate(Arithmetic("divide", "a", "b", "c"), "java") == "c = a / b;"
    assert generate(Arithmetic("modulus", "a", "2", "r"), "cpp") == "r = a % 2;"
    assert generate(Arithmetic("subtract", "a", "b"), "python") == "a - b"
    assert generate(Arithmetic("multiply", "a", "b"), "cpp") == "a * b;"


def test_increment_and_decrement():
    assert generate(Increment("x"), "python") == "x += 1"
    assert generate(Increment("x"), "java") == "x++;"
    assert generate(Increment("x", "5"), "java") == "x += 5;"
    assert generate(Decrement("x"), "cpp") == "x--;"
    assert generate(Decrement("x", "2"), "python") == "x -= 2"


def test_calls_and_returns():
    assert generate(FunctionCall("greet", ("1", "true")), "python") == "greet(1, True)"
    assert generate(FunctionCall("greet", ("1", "true")), "java") == "greet(1, true);"
    assert generate(Return(), "python") == "return"
    assert generate(Return(), "cpp") == "return;"
    assert generate(Return('"done"'), "java") == 'return "done";'


def test_lists():
    nums = ListCreation("nums", ("1", "2", "3"))
    assert generate(nums, "python") == "nums = [1, 2, 3]"
    assert generate(nums, "java") == "ArrayList<Integer> nums = new ArrayList<>(Arrays.asList(1, 2, 3));"
    assert generate(nums, "cpp") == "std::vector<int> nums = {1, 2, 3};"

    mixed = ListCreation("mixed", ("1", '"a"'))
    assert generate(mixed, "java") == 'ArrayList<Object> mixed = new ArrayList<>(Arrays.asList(1, "a"));'
    assert generate(mixed, "cpp") == 'std::vector mixed = {1, "a"};'

    empty = ListCreation("items")
    assert generate(empty, "python") == "items = []"
    assert generate(empty, "java") == "ArrayList<Object> items = new ArrayList<>();"
    assert generate(empty, "cpp") == "std::vector<int> items;"

    assert generate(Append("nums", "4"), "python") == "nums.append(4)"
    assert generate(Append("nums", "4"), "java") == "nums.add(4);"
    assert generate(Append("nums", "4"), "cpp") == "nums.push_back(4);"


def test_comment():
    assert generate(Comment("hello there"), "python") == "# hello there"
    assert generate(Comment("hello there"), "java") == "// hello there"


# =============================================================================
# Compound statements
# =============================================================================

def test_if_else():
    node = IfStatement(Condition("age", "greater", "17"), Print(('"Adult"',)), Print(('"Minor"',)))
    assert generate(node, "python") == 'if age > 17:\n    print("Adult")\nelse:\n    print("Minor")'
    assert generate(node, "java") == (
        'if (age > 17) {\n    System.out.println("Adult");\n'
        '} else {\n    System.out.println("Minor");\n}'
    )


def test_empty_bodies_render_noop():
    node = IfStatement(Condition("x", "not_equal", "true"))
    assert generate(node, "python") == "if x != True:\n    pass"
    assert generate(node, "java") == "if (x != true) {\n    ;\n}"
    assert generate(FunctionDef("f"), "python") == "def f():\n    pass"


def test_while():
    node = WhileLoop(Condition("counter", "less", "5"), Increment("counter"))
    assert generate(node, "python") == "while counter < 5:\n    counter += 1"
    assert generate(node, "cpp") == "while (counter < 5) {\n    counter++;\n}"


def test_for_loops():
    node = ForLoop("i", "1", "11", "1", Print(("i",)))
    assert generate(node, "python") == "for i in range(1, 11):\n    print(i)"
    assert generate(node, "java") == "for (int i = 1; i < 11; i++) {\n    System.out.println(i);\n}"

    stepped = ForLoop("i", "0", "10", "2", Print(("i",)))
    assert generate(stepped, "python").startswith("for i in range(0, 10, 2):")
    assert generate(stepped, "cpp").startswith("for (int i = 0; i < 10; i += 2) {")

    down = ForLoop("i", "10", "0", "-2")
    assert generate(down, "cpp").startswith("for (int i = 10; i > 0; i -= 2) {")
    assert generate(ForLoop("i", "3", "0", "-1"), "java").startswith("for (int i = 3; i > 0; i--) {")


def test_function_definitions():
    greet = FunctionDef("greet", (), Print(('"Hello!"',)))
    assert generate(greet, "python") == 'def greet():\n    print("Hello!")'
    assert generate(greet, "java") == 'public static void greet() {\n    System.out.println("Hello!");\n}'

    identity = FunctionDef("identity", ("n",), Return("n"))
    assert generate(identity, "python") == "def identity(n):\n    return n"
    assert generate(identity, "java") == "public static Object identity(Object n) {\n    return n;\n}"
    assert generate(identity, "cpp") == "auto identity(auto n) {\n    return n;\n}"


def test_nested_bodies_indent_per_level():
    node = WhileLoop(
        Condition("x", "less", "3"),
        IfStatement(Condition("x", "equal", "1"), Print(("x",))),
    )
    assert generate(node, "python") == "while x < 3:\n    if x == 1:\n        print(x)"


# =============================================================================
# Unsupported nodes
# =============================================================================

class Mystery:
    node_type = "mystery"


def test_unknown_node_renders_placeholder():
    assert generate(Mystery(), "python") == "# Unsupported node type: Mystery"
    assert generate(Mystery(), "java") == "// Unsupported node type: Mystery"
    assert generate(None, "cpp") == ""


def test_unknown_language_is_rejected():
    with pytest.raises(ValueError, match="Unsupported language"):
        CodeGenerator("cobol")
    assert CodeGenerator("C++").language is TargetLanguage.CPP


# =============================================================================
# Whole programs
# =============================================================================

def test_python_program_hoists_functions():
    nodes = [Print(("x",)), FunctionDef("greet", (), Print(('"hi"',))), FunctionCall("greet")]
    assert generate_program(nodes, "python") == 'def greet():\n    print("hi")\n\nprint(x)\ngreet()'


def test_java_program_wrapping():
    nodes = [VariableCreation("x", "10"), Print(("x",))]
    assert generate_program(nodes, "java") == (
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        "        int x = 10;\n"
        "        System.out.println(x);\n"
        "    }\n"
        "}"
    )


def test_java_imports_detected_once_including_nested_bodies():
    nodes = [
        Input("a"),
        IfStatement(Condition("a", "equal", '"y"'), Input("b")),
        ListCreation("nums", ("1",)),
    ]
    code = generate_program(nodes, "java")
    assert code.count("import java.util.Scanner;") == 1
    assert "import java.util.ArrayList;" in code
    assert "import java.util.Arrays;" in code
    assert "        Scanner scanner = new Scanner(System.in);" in code


def test_java_functions_sit_beside_main():
    nodes = [FunctionCall("greet"), FunctionDef("greet", (), Print(('"hi"',)))]
    code = generate_program(nodes, "java")
    assert code.index("public static void greet()") < code.index("public static void main")
    assert "    public static void greet() {\n        System.out.println(\"hi\");\n    }" in code


def test_cpp_program_wrapping():
    nodes = [VariableCreation("x", "10"), Print(("x",))]
    assert generate_program(nodes, "cpp") == (
        "#include <iostream>\n"
        "\n"
        "int main() {\n"
        "    int x = 10;\n"
        "    std::cout << x << std::endl;\n"
        "    return 0;\n"
        "}"
    )


def test_cpp_includes_only_what_is_needed():
    assert generate_program([VariableCreation("x", "1")], "cpp").startswith("int main() {")

    code = generate_program([VariableCreation("s", '"hi"'), Append("v", "1")], "cpp")
    assert "#include <vector>" in code
    assert "#include <string>" in code
    assert "#include <iostream>" not in code


def test_cpp_functions_before_main():
    nodes = [FunctionCall("greet"), FunctionDef("greet", (), Print(('"hi"',)))]
    code = generate_program(nodes, "cpp")
    assert code.index("void greet() {") < code.index("int main() {")


def test_empty_program():
    assert generate_program([], "java") == ""
