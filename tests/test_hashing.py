from chaintable.hashing import HashedKey, builtin_hash, fnv1a_32, signed_32


def test_fnv1a_32():
    assert fnv1a_32("") == 0x811C9DC5
    assert fnv1a_32("a") == 0xE40C292C
    assert fnv1a_32("foobar") == 0xBF9CF968

    for s in ["", "a", "hello world", "ünïcode"]:
        assert 0 <= fnv1a_32(s) <= 0xFFFFFFFF


def test_signed_32():
    assert signed_32(0) == 0
    assert signed_32(0x7FFFFFFF) == 0x7FFFFFFF
    assert signed_32(0x80000000) == -(2**31)
    assert signed_32(0xFFFFFFFF) == -1
    assert signed_32(fnv1a_32("a")) < 0


def test_builtin_hash():
    assert builtin_hash("abc") == hash("abc")
    assert builtin_hash(-5) == -5


def test_hashed_key():
    k = HashedKey("a")
    assert k.code == fnv1a_32("a")
    assert hash(k) == k.code
    assert k == HashedKey("a")
    assert k != HashedKey("b")
