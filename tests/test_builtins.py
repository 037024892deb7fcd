import pytest

from mallet.types import Atom, Error, HashMap, Keyword, List, Nil, Symbol, Vector


# -------------------------------
# Arithmetic and comparison
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", 0),
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(- 5)", -5),
        ("(*)", 1),
        ("(* 2 3 4)", 24),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 100 5 2)", 10),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(<= 2 2)", True),
        ("(> 1 2)", False),
        ("(>= 3 3 1)", True),
    ]
)
def test_arithmetic_and_comparison(interp, source, expected):
    assert interp.eval(source) == expected


def test_arithmetic_errors(interp):
    assert interp.eval("(/ 1 0)") == Error("Division by zero")
    assert interp.eval('(+ 1 "a")') == Error("All arguments to + must be numbers")
    assert interp.eval("(+ 1 true)") == Error("All arguments to + must be numbers")
    assert isinstance(interp.eval("(-)"), Error)


# -------------------------------
# Equality and predicates
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1 1)", True),
        ("(= 1 1 2)", False),
        ("(= (list 1 2) [1 2])", True),
        ("(= [1 [2]] (list 1 (list 2)))", True),
        ("(= (list 1) (list 1 2))", False),
        ("(= true 1)", False),
        ("(= false 0)", False),
        ('(= "a" (symbol "a"))', False),
        ('(= :a (keyword "a"))', True),
        ("(= {:a 1} {:a 1})", True),
        ("(= {:a 1} {:a 2})", False),
        ("(= nil nil)", True),
        ("(= nil false)", False),
        ("(= (atom 1) (atom 1))", False),
    ]
)
def test_equality(interp, source, expected):
    assert interp.eval(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(nil? nil)", True),
        ("(nil? false)", False),
        ("(true? true)", True),
        ("(true? 1)", False),
        ("(false? false)", True),
        ("(symbol? 'a)", True),
        ('(symbol? "a")', False),
        ("(keyword? :a)", True),
        ('(string? "a")', True),
        ("(string? :a)", False),
        ("(number? 1)", True),
        ("(number? true)", False),
        ("(fn? +)", True),
        ("(fn? (fn* () 1))", True),
        ("(fn? 1)", False),
        ("(macro? cond)", True),
        ("(list? (list))", True),
        ("(list? [])", False),
        ("(vector? [])", True),
        ("(sequential? [])", True),
        ("(sequential? {})", False),
        ("(map? {})", True),
        ("(atom? (atom 1))", True),
        ("(atom? 1)", False),
    ]
)
def test_predicates(interp, source, expected):
    assert interp.eval(source) is expected


def test_predicate_arity(interp):
    assert isinstance(interp.eval("(nil?)"), Error)


# -------------------------------
# Sequences
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2)", [1, 2]),
        ("(count (list 1 2 3))", 3),
        ("(count [])", 0),
        ("(count nil)", 0),
        ("(count {:a 1})", 1),
        ("(count 5)", 0),
        ("(empty? ())", True),
        ("(empty? [1])", False),
        ("(empty? nil)", True),
        ("(cons 1 [2 3])", [1, 2, 3]),
        ("(cons 1 nil)", [1]),
        ("(concat [1] (list 2) [] nil)", [1, 2]),
        ("(concat)", []),
        ("(nth [1 2 3] 1)", 2),
        ("(first [1 2])", 1),
        ("(first ())", Nil),
        ("(first nil)", Nil),
        ("(rest [1 2 3])", [2, 3]),
        ("(rest [])", []),
        ("(rest nil)", []),
        ("(conj (list 1 2) 3 4)", [4, 3, 1, 2]),
        ("(conj [1 2] 3 4)", [1, 2, 3, 4]),
        ("(seq [1 2])", [1, 2]),
        ("(seq [])", Nil),
        ("(seq nil)", Nil),
        ('(seq "ab")', ["a", "b"]),
        ('(seq "")', Nil),
        ("(apply + 1 2 [3 4])", 10),
        ("(apply list [])", []),
        ("(apply (fn* (a b) (- a b)) [10 4])", 6),
        ("(map (fn* (x) (* x x)) [1 2 3])", [1, 4, 9]),
        ("(map + ())", []),
        ("(vec (list 1 2))", [1, 2]),
    ]
)
def test_sequence_functions(interp, source, expected):
    assert interp.eval(source) == expected


def test_sequence_result_types(interp):
    assert isinstance(interp.eval("(cons 1 [2])"), List)
    assert isinstance(interp.eval("(concat [1] [2])"), List)
    assert isinstance(interp.eval("(rest [1 2])"), List)
    assert isinstance(interp.eval("(conj [1] 2)"), Vector)
    assert isinstance(interp.eval("(vec (list 1))"), Vector)
    assert isinstance(interp.eval("(vector 1 2)"), Vector)


def test_sequence_errors(interp):
    assert interp.eval("(nth [1] 5)") == Error("nth: index out of range")
    assert interp.eval("(nth [1] -1)") == Error("nth: index out of range")
    assert isinstance(interp.eval("(first 5)"), Error)
    assert isinstance(interp.eval("(cons 1 2)"), Error)
    assert isinstance(interp.eval("(map 1 [1])"), Error)
    assert isinstance(interp.eval("(apply +)"), Error)


def test_map_stops_at_first_error(interp):
    interp.eval("(def! seen (atom 0))")
    result = interp.eval("(map (fn* (x) (do (swap! seen (fn* (n) (+ n 1))) (/ 1 x))) [1 0 2])")
    assert result == Error("Division by zero")
    assert interp.eval("@seen") == 2


def test_sequence_arguments_are_not_mutated(interp):
    interp.eval("(def! v [1 2])")
    interp.eval("(conj v 3)")
    interp.eval("(cons 0 v)")
    assert interp.eval("v") == [1, 2]


# -------------------------------
# Hash-maps
# -------------------------------
def test_hash_map_functions(interp):
    interp.eval('(def! m (hash-map :a 1 "b" 2))')
    assert interp.eval("(get m :a)") == 1
    assert interp.eval('(get m "b")') == 2
    assert interp.eval("(get m :missing)") is Nil
    assert interp.eval("(get nil :a)") is Nil
    assert interp.eval("(contains? m :a)") is True
    assert interp.eval("(contains? m :z)") is False
    assert interp.eval("(keys m)") == [Keyword("a"), "b"]
    assert interp.eval("(vals m)") == [1, 2]


def test_assoc_and_dissoc_return_new_maps(interp):
    interp.eval("(def! m {:a 1})")
    assert interp.eval("(assoc m :b 2 :c 3)") == HashMap([(Keyword("a"), 1), (Keyword("b"), 2), (Keyword("c"), 3)])
    assert interp.eval("(dissoc {:a 1 :b 2} :a :z)") == HashMap([(Keyword("b"), 2)])
    assert interp.eval("m") == HashMap([(Keyword("a"), 1)])


def test_hash_map_errors(interp):
    assert interp.eval("(hash-map :a)") == Error("hash-map requires an even number of elements")
    assert isinstance(interp.eval("(assoc [1] :a 1)"), Error)
    assert isinstance(interp.eval("(hash-map [1] 2)"), Error)


# -------------------------------
# Atoms
# -------------------------------
def test_atoms(interp):
    interp.eval("(def! a (atom 1))")
    assert isinstance(interp.eval("a"), Atom)
    assert interp.eval("(deref a)") == 1
    assert interp.eval("@a") == 1
    assert interp.eval("(reset! a 5)") == 5
    assert interp.eval("(swap! a + 2 3)") == 10
    assert interp.eval("(swap! a (fn* (x) (* x 2)))") == 20
    assert interp.eval("@a") == 20


def test_atom_errors(interp):
    assert isinstance(interp.eval("(deref 1)"), Error)
    assert isinstance(interp.eval("(reset! 1 2)"), Error)
    assert isinstance(interp.eval("(swap! (atom 1) 2)"), Error)


def test_swap_error_leaves_atom_unchanged(interp):
    interp.eval("(def! a (atom 1))")
    assert interp.eval("(swap! a (fn* (x) (/ x 0)))") == Error("Division by zero")
    assert interp.eval("@a") == 1


# -------------------------------
# Metadata, symbols, keywords
# -------------------------------
def test_metadata(interp):
    interp.eval("(def! v [1 2])")
    assert interp.eval("(meta (with-meta v {:a 1}))") == HashMap([(Keyword("a"), 1)])
    assert interp.eval("(meta v)") is Nil
    assert interp.eval("(= v (with-meta v :m))") is True
    interp.eval('(def! f (with-meta (fn* (x) x) "doc"))')
    assert interp.eval("(meta f)") == "doc"
    assert interp.eval("(f 3)") == 3
    assert interp.eval("(meta ^{:k 1} [])") == HashMap([(Keyword("k"), 1)])
    assert isinstance(interp.eval("(meta 1)"), Error)


def test_symbol_and_keyword(interp):
    assert interp.eval('(symbol "abc")') == Symbol("abc")
    assert interp.eval('(keyword "abc")') == Keyword("abc")
    assert interp.eval("(keyword :abc)") == Keyword("abc")
    assert isinstance(interp.eval("(symbol 1)"), Error)


# -------------------------------
# Strings and IO
# -------------------------------
def test_prn_and_println(interp, capsys):
    assert interp.eval('(prn "a" 1 :k)') is Nil
    assert interp.eval('(println "a" 1 :k)') is Nil
    assert interp.eval("(println)") is Nil
    assert capsys.readouterr().out == '"a" 1 :k\na 1 :k\n\n'


def test_read_string(interp):
    assert interp.eval('(read-string "(1 2 (3))")') == [1, 2, [3]]
    assert interp.eval('(read-string "7 8")') == 8
    assert interp.eval('(read-string ";; nothing")') is Nil
    assert interp.eval('(read-string "(1")') == Error("unterminated form: expected ')', got EOF")


def test_read_string_inverts_pr_str(interp):
    assert interp.eval('(= (read-string (pr-str [1 "a\\nb" {:k nil}])) [1 "a\\nb" {:k nil}])') is True


def test_slurp(interp, tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("hello\nworld", encoding="utf-8")
    assert interp.eval(f'(slurp "{path}")') == "hello\nworld"
    missing = interp.eval(f'(slurp "{tmp_path / "missing.txt"}")')
    assert isinstance(missing, Error)
    assert missing.message.startswith("slurp: cannot read")


def test_readline(interp, monkeypatch):
    lines = iter(["typed text"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert interp.eval('(readline "> ")') == "typed text"
    assert interp.eval('(readline "> ")') is Nil


# -------------------------------
# eval and host bindings
# -------------------------------
def test_eval(interp):
    assert interp.eval("(eval (list + 1 2))") == 3
    assert interp.eval('(eval (read-string "(+ 2 3)"))') == 5
    assert interp.eval("(eval 5)") == 5


def test_eval_uses_global_environment(interp):
    interp.eval("(def! x 5)")
    assert interp.eval("(let* (x 1) (eval 'x))") == 5
    interp.eval("(let* (y 2) (eval '(def! from-eval 9)))")
    assert interp.eval("from-eval") == 9


def test_time_ms(interp):
    first = interp.eval("(time-ms)")
    assert isinstance(first, int) and first > 0
    assert interp.eval("(<= (time-ms) (time-ms))") is True


# -------------------------------
# Booleans and numbers as distinct hash-map keys
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(count {1 :a true :b})", 2),
        ("(count {0 :z false :y})", 2),
        ("(get {1 :a true :b} 1)", Keyword("a")),
        ("(get {1 :a true :b} true)", Keyword("b")),
        ("(get {1 :a} true)", Nil),
        ("(get {0 :z} false)", Nil),
        ("(get {false :y} 0)", Nil),
        ("(contains? {1 :a} true)", False),
        ("(contains? {true :a} 1)", False),
        ("(contains? {true :a} true)", True),
        ("(keys {1 :a true :b})", [1, True]),
        ("(count (dissoc {1 :a true :b} true))", 1),
        ("(get (assoc {0 :z} false :y) 0)", Keyword("z")),
    ]
)
def test_boolean_and_number_keys_are_distinct(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize("source", ["{1 :a, true :b}", "{0 :z, false :y}"])
def test_boolean_number_map_round_trip(interp, source):
    assert interp.eval(f'(pr-str (read-string "{source}"))') == source
    assert interp.rep(source) == source


def test_boolean_keys_are_returned_as_booleans(interp):
    keys = interp.eval("(keys {1 :a true :b})")
    assert keys[0] is not True and keys[1] is True


def test_keyword_builtin_keeps_name_literal(interp):
    assert interp.rep('(keyword ":a")') == "::a"
    assert interp.rep('(keyword "a")') == ":a"
    assert interp.eval('(= :a (keyword "a"))') is True
