import pytest

from lumen.errors import LumenArityError, LumenInvalidSymbol, LumenTypeError, LumenUnboundSymbol
from lumen.types.lambda_fn import Lambda
from lumen.types.symbol import Symbol


# ---------- if ----------

def test_if_only_evaluates_chosen_branch(run):
    assert run("(if true 1 undefined)") == 1
    assert run("(if false undefined 2)") == 2


@pytest.mark.parametrize("source", ["(if 1 2 3)", "(if (+ 0 0) 2 3)", "(if (lambda (x) x) 1 2)"])
def test_if_requires_boolean_test(run, source):
    with pytest.raises(LumenTypeError):
        run(source)


@pytest.mark.parametrize("source", ["(if true 1)", "(if true)", "(if)", "(if true 1 2 3)"])
def test_if_arity(run, source):
    with pytest.raises(LumenArityError):
        run(source)


# ---------- define ----------

def test_define_returns_symbol(run):
    assert run("(define x 1)") == Symbol("x")


def test_define_is_idempotent(run):
    run("(define x 5)")
    run("(define x 5)")
    assert run("(+ x 0)") == 5


def test_define_overwrites(run):
    assert run("(define x 1)", "(define x 2)", "x") == 2


@pytest.mark.parametrize("source", ["(define 1 2)", "(define (x) 2)", "(define true 2)"])
def test_define_target_must_be_symbol(run, source):
    with pytest.raises(LumenInvalidSymbol):
        run(source)


@pytest.mark.parametrize("source", ["(define x)", "(define)", "(define x 1 2)"])
def test_define_arity(run, source):
    with pytest.raises(LumenArityError):
        run(source)


def test_failed_define_installs_nothing(run, interp):
    with pytest.raises(LumenUnboundSymbol):
        run("(define z (+ 1 undefined))")
    assert interp.env.find(Symbol("z")) is None


def test_define_inside_lambda_is_local(run):
    run("(define x 1)")
    run("(define set-x (lambda (v) (define x v)))")
    assert run("(set-x 5)") == Symbol("x")
    assert run("x") == 1


# ---------- lambda ----------

def test_lambda_builds_closure_without_evaluating(run, interp):
    fn = run("(lambda (x) (undefined x))")
    assert isinstance(fn, Lambda)
    assert fn.params == [Symbol("x")]
    assert fn.body == [Symbol("undefined"), Symbol("x")]
    assert fn.env is interp.env


@pytest.mark.parametrize("source", ["(lambda (x))", "(lambda)", "(lambda (x) x x)"])
def test_lambda_arity(run, source):
    with pytest.raises(LumenArityError):
        run(source)


@pytest.mark.parametrize("source", ["((lambda x x) 1)", "((lambda (1) 1) 2)", "((lambda (x (y)) x) 1 2)"])
def test_lambda_params_must_be_symbols(run, source):
    with pytest.raises(LumenTypeError):
        run(source)


@pytest.mark.parametrize("call", ["(f 1)", "(f 1 2 3)", "(f)"])
def test_arity_mismatch_never_partially_applies(run, call):
    run("(define f (lambda (a b) (+ a b)))")
    with pytest.raises(LumenArityError):
        run(call)


def test_arity_checked_before_arguments_evaluate(run, interp):
    run("(define f (lambda (a) a))")
    with pytest.raises(LumenArityError):
        run("(f (define leaked 1) 2)")
    assert interp.env.find(Symbol("leaked")) is None


def test_zero_argument_lambda(run):
    assert run("(define seven (lambda () 7))", "(seven)") == 7


# ---------- scoping ----------

def test_call_bindings_do_not_leak(run):
    run("(define f (lambda (y) (define inner (* y 2))))")
    run("(f 21)")
    with pytest.raises(LumenUnboundSymbol):
        run("y")
    with pytest.raises(LumenUnboundSymbol):
        run("inner")


def test_parameters_shadow_globals(run):
    run("(define x 100)")
    run("(define f (lambda (x) (+ x 1)))")
    assert run("(f 1)") == 2
    assert run("x") == 100


def test_closure_capture(run):
    run("(define make-adder (lambda (n) (lambda (x) (+ x n))))")
    run("(define add5 (make-adder 5))")
    assert run("(add5 10)") == 15


def test_closures_keep_separate_frames(run):
    run("(define make-adder (lambda (n) (lambda (x) (+ x n))))")
    run("(define add1 (make-adder 1))")
    run("(define add10 (make-adder 10))")
    assert run("(add1 1)") == 2
    assert run("(add10 1)") == 11


def test_closures_are_lexical_not_dynamic(run):
    run("(define n 1)")
    run("(define get-n (lambda () n))")
    run("(define call-with-n (lambda (n) (get-n)))")
    assert run("(call-with-n 99)") == 1


def test_later_global_defines_are_visible_to_earlier_closures(run):
    run("(define f (lambda () later))")
    run("(define later 3)")
    assert run("(f)") == 3


# ---------- keywords ----------

def test_special_forms_cannot_be_shadowed(run):
    run("(define if (lambda (a b c) c))")
    assert run("(if true 1 2)") == 1
    run("(define lambda 5)")
    assert isinstance(run("(lambda (x) x)"), Lambda)
