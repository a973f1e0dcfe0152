from typing import Iterator, Optional
import importlib.resources
import logging
import enum

import lark

from easter_report import model
from easter_report.util import YearSpecError

log = logging.getLogger(__name__)


def get_parser():
    grammar = importlib.resources.read_text("easter_report", "year_spec.lark")
    return lark.Lark(grammar, start="year_spec", parser="earley")


PARSER = get_parser()


class Rules(enum.StrEnum):
    year_spec = enum.auto()
    year_selector = enum.auto()
    year_range = enum.auto()
    year = enum.auto()


class Tokens(enum.StrEnum):
    @staticmethod
    def _generate_next_value_(name, start, count, last_values) -> str:
        return name

    YEAR = enum.auto()


def parse_year_spec_tree(spec: str) -> lark.Tree:
    try:
        return PARSER.parse(spec)
    except lark.UnexpectedInput as err:
        raise YearSpecError("malformed year specification", spec, err.column) from err


def parse_year_spec(spec: str) -> model.YearSpec:
    """Parse a year specification such as `2012,2013,2015-2020`."""
    tree = parse_year_spec_tree(spec)
    try:
        year_spec = build_year_spec(tree)
    except YearSpecError as err:
        if err.spec is None:
            err.spec = spec
        raise
    log.debug("parsed %r as %s", spec, year_spec)
    return year_spec


def parse_years(spec: str) -> list[int]:
    """List the years selected by a year specification, in the written order."""
    return list(parse_year_spec(spec).years())


def build_year_spec(tree: lark.Tree) -> model.YearSpec:
    st = SubtreeProcessor(tree, Rules.year_spec)
    selectors = []
    for child in st.iter_subtree(Rules.year_selector):
        selectors.append(build_year_selector(child))
    return model.YearSpec(selectors)


def build_year_selector(tree: lark.Tree) -> model.YearSelector:
    st = SubtreeProcessor(tree, Rules.year_selector)
    child = st.next_subtree()
    match child.data:
        case Rules.year_range:
            return build_year_range(child)
        case Rules.year:
            return build_year(child)
        case _:
            raise st.unexpected_token(child.data)


def build_year_range(tree: lark.Tree) -> model.YearRange:
    st = SubtreeProcessor(tree, Rules.year_range)
    year_start = build_year_number(st.get_token(Tokens.YEAR))
    year_end = build_year_number(st.get_token(Tokens.YEAR))
    return model.YearRange(year_start, year_end)


def build_year(tree: lark.Tree) -> model.Year:
    st = SubtreeProcessor(tree, Rules.year)
    return model.Year(build_year_number(st.get_token(Tokens.YEAR)))


def build_year_number(token: str) -> int:
    try:
        return int(token)
    except ValueError as err:
        raise YearSpecError(f"year {token[:10]}... is out of range") from err


# Tree helpers


class SubtreeProcessor:
    def __init__(self, tree: lark.Tree, expect: Optional[Rules] = None) -> None:
        if expect is not None and tree.data != expect:
            raise Exception(f"Grammar error: expected {expect}; got {tree.data}")
        self.tree = tree
        self.offset = 0

    def iter_subtree(self, rule: Optional[Rules] = None) -> Iterator[lark.Tree]:
        i = self.offset
        while i < len(self.tree.children):
            child = self.tree.children[i]
            i += 1
            if isinstance(child, lark.Tree) and (rule is None or child.data == rule):
                self.offset = i
                yield child

    def get_token_opt(self, token: Tokens) -> Optional[str]:
        i = self.offset
        while i < len(self.tree.children):
            child = self.tree.children[i]
            i += 1
            if isinstance(child, lark.Token) and child.type == token:
                self.offset = i
                return child.value

    def get_token(self, token: Tokens) -> str:
        child = self.get_token_opt(token)
        if child is None:
            raise Exception(f"{self.tree.data} has no {token}")
        return child

    def next_subtree_opt(self) -> Optional[lark.Tree]:
        i = self.offset
        while i < len(self.tree.children):
            child = self.tree.children[i]
            i += 1
            if isinstance(child, lark.Tree):
                self.offset = i
                return child

    def next_subtree(self) -> lark.Tree:
        subtree = self.next_subtree_opt()
        if subtree is None:
            raise Exception(f"{self.tree.data} is empty")
        return subtree

    def unexpected_token(self, token: Optional[str]) -> Exception:
        if token is None:
            return Exception(f"Grammar error: {self.tree.data} empty")
        return Exception(f"Grammar error: found {token} inside of {self.tree.data}")
