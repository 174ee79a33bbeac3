import re

import pytest
from Crypto.Hash import keccak

from soroban_domains import SorobanDomainsSDK, parse_domain
from soroban_domains.node import root_digest
from soroban_domains.utils.hash import Keccak256, keccak256, keccak256_hex

HEX64 = re.compile(r"^[0-9a-f]{64}$")


def _k(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


@pytest.mark.parametrize(
    "domain,sub,expected",
    [
        ("example", None, "dc75a4bce9e729fa81f394f85e2d09e0e47d7b0b2f3bbd5ffe8aef88cedb9eca"),
        ("stellar", None, "2fe4cc6a15f9466bad71ed407a8f1b7da81efd931e7712753152aa17abc0e06e"),
        ("example", "pay", "c0dc7e7120bb4603fdd0cb5062e2389680e275dfabff2c485eb06b388d1e1c36"),
        ("stellar", "www", "a10b1fc1bac400cefe5936e73b70556b80be751ed3fa46e4d8ca7d2bdb164418"),
        ("", None, "547469f0c42d14194399c8728696208627e88496760de28aa3d6bf331ad15c38"),
    ],
)
def test_pinned_vectors(domain, sub, expected):
    assert parse_domain(domain, sub) == expected


def test_keccak_known_answers():
    assert keccak256_hex(b"") == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    assert keccak256_hex("abc") == "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"
    assert keccak256_hex(b"abc", prefix=True).startswith("0x")


def test_streaming_matches_concatenation():
    a, b = keccak256("xlm"), keccak256("example")
    assert Keccak256().update(a).update(b).digest() == _k(a + b)
    assert root_digest("example") == _k(a + b)


def test_sub_domain_commits_to_hash_of_root():
    root = root_digest("example")
    expected = _k(_k(root) + _k(b"pay")).hex()
    assert parse_domain("example", "pay") == expected


def test_deterministic_lowercase_hex():
    first = parse_domain("stellar")
    for _ in range(3):
        assert parse_domain("stellar") == first
    assert HEX64.match(first)
    assert HEX64.match(parse_domain("stellar", "www"))


def test_distinct_domains_and_sub_domains():
    domains = ["a", "b", "example", "exampl", "xlm", "Example", "ünïcode"]
    nodes = {parse_domain(d) for d in domains}
    assert len(nodes) == len(domains)

    subs = ["www", "pay", "mail", "WWW", "w"]
    sub_nodes = {parse_domain("example", s) for s in subs}
    assert len(sub_nodes) == len(subs)
    assert parse_domain("example") not in sub_nodes


def test_empty_sub_domain_is_top_level():
    assert parse_domain("example", "") == parse_domain("example")
    assert parse_domain("example", None) == parse_domain("example")


def test_exposed_on_sdk_class():
    assert SorobanDomainsSDK.parse_domain("example") == parse_domain("example")
