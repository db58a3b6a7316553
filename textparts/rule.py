# -*- coding: utf-8 -*-
#
# This file is part of `textparts`, a library for reversible plain text structures
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


r"""
Parse rules turn a text into a nested list of alternating content and
boundary strings, which is then used to build a :class:`~.part.Part`.

A :class:`ParseRule` is an ordered list of rules. Each rule is a compiled
regular expression or a callable. The rules are applied one after another,
each rule working on the result of the previous one.

A regular expression rule splits every content element with
:func:`~.split.split_with_delimiter`; the delimiters become boundaries.
Nested lists are split recursively, boundaries are left alone::

    >>> r = ParseRule(re.compile(r'\n{2,}'))
    >>> r = r.copy().push(re.compile(r"\s*=\s*"))
    >>> r.apply("\n\n\nFirst = para. \n\n")
    ['', '\n\n\n', 'First', ' = ', 'para. ', '\n\n']

A callable rule gets the current value and must return the new one. The
first rule gets the input string if a string was given to :meth:`~ParseRule.apply`.
The decorator form of :meth:`~ParseRule.push` registers a function::

    >>> @r.push(name="lower")
    ... def lower(value):
    ...     return [s.lower() for s in value]

"""

import logging
import re

from .config import BLANK, LINEBREAK_PATTERN
from .exceptions import ConfigError, RangeError
from .node import Node
from .split import add_grouping, split_with_delimiter
from .util import positive_index_checked


logger = logging.getLogger(__name__)


def _is_sequence(value):
    """Return True if value is a list, a tuple or a Part."""
    return isinstance(value, (list, tuple)) or (isinstance(value, Node) and value.is_part())


class ParseRule:
    """An ordered list of optionally named rules.

    The ``rule`` argument can be another ParseRule (which is copied), a list
    of rules, a compiled regular expression or a callable. If a single rule is
    given, the ``name`` can be given as well.

    """
    def __init__(self, rule=None, name=None):
        self.rules = []     #: the list of rules
        self.names = []     #: the names of the rules, a name can be None
        self.frozen = False #: if True, the rule can't be modified
        if isinstance(rule, ParseRule):
            self.rules = list(rule.rules)
            self.names = list(rule.names)
        elif isinstance(rule, (list, tuple)):
            for r in rule:
                self.push(r)
        elif rule is not None:
            self.push(rule, name)

    def __repr__(self):
        names = ", ".join(str(name) for name in self.names)
        return "<{} [{}]{}>".format(type(self).__name__, names, " (frozen)" if self.frozen else "")

    def __len__(self):
        return len(self.rules)

    def _check_frozen(self):
        if self.frozen:
            raise ConfigError("can't modify frozen {}".format(repr(self)))

    def freeze(self):
        """Make this rule read-only and return it."""
        self.frozen = True
        return self

    def copy(self):
        """Return a copy that is not frozen."""
        return type(self)(self)

    __copy__ = copy

    def push(self, rule=None, name=None):
        """Append a rule and return self.

        A regular expression without capturing groups is enclosed in one.
        When called without a rule, returns a decorator that pushes the
        decorated function (and returns it unchanged).

        """
        self._check_frozen()
        if rule is None:
            def decorator(func):
                self.push(func, name)
                return func
            return decorator
        if isinstance(rule, re.Pattern):
            if not rule.groups:
                rule = add_grouping(rule)
        elif not callable(rule):
            raise TypeError("rule must be a compiled regular expression or callable, not {}".format(
                type(rule).__name__))
        self.rules.append(rule)
        self.names.append(None)
        if name is not None:
            try:
                self.set_name_at(name, -1)
            except ConfigError:
                del self.rules[-1], self.names[-1]
                raise
        return self

    def pop(self, n=None):
        """Remove the last rule and return it, or None if there are no rules.

        If ``n`` is given, remove the last ``n`` rules and return them as a list.

        """
        self._check_frozen()
        if n is None:
            if not self.rules:
                return None
            del self.names[-1]
            return self.rules.pop()
        n = min(n, len(self.rules))
        if n <= 0:
            return []
        result = self.rules[-n:]
        del self.rules[-n:], self.names[-n:]
        return result

    def set_name_at(self, name, index):
        """Set the name of the rule at index; None removes the name.

        Raises :exc:`~.exceptions.ConfigError` if the name is already used for
        another rule. Returns the non-negative index.

        """
        self._check_frozen()
        pos = positive_index_checked(index, len(self.rules), False, "rule index")
        if name is not None:
            name = str(name)
            if name in self.names and self.names.index(name) != pos:
                raise ConfigError("name {} is already used for rule {}".format(
                    repr(name), self.names.index(name)))
        self.names[pos] = name
        return pos

    def rule_at(self, key):
        """Return the rule at the index or with the name ``key``, or None."""
        if isinstance(key, str):
            try:
                return self.rules[self.names.index(key)]
            except ValueError:
                return None
        try:
            return self.rules[key]
        except IndexError:
            return None

    def rules_at(self, keys):
        """Return a list of rules for a slice, a single key or a list of keys."""
        if isinstance(keys, slice):
            return self.rules[keys]
        elif isinstance(keys, (int, str)):
            return [self.rule_at(keys)]
        return [self.rule_at(key) for key in keys]

    def apply(self, value, index=None):
        """Apply the rules to value and return the result.

        If ``index`` is given, only the rules selected by it (see
        :meth:`rules_at`) are applied, in that order.

        """
        if index is None:
            index = slice(None)
        rules = self.rules_at(index)
        if isinstance(index, slice):
            keys = range(len(self.rules))[index]
        elif isinstance(index, (int, str)):
            keys = [index]
        else:
            keys = index
        for key, rule in zip(keys, rules):
            if rule is None:
                raise RangeError("no rule found for {}".format(repr(key)))
            logger.debug("applying rule %r", rule)
            if isinstance(rule, re.Pattern):
                value = self._split(value, rule)
            else:
                value = rule(value)
        return value

    def _split(self, value, pattern):
        """Split all content elements in value on pattern, recursively."""
        if isinstance(value, str):
            return split_with_delimiter(value, pattern)
        result = []
        concat = False
        for i, item in enumerate(value):
            if i % 2:
                if not concat:
                    result.append(item)
                elif _is_sequence(item):
                    # can't add the delimiter to a list
                    result.extend(("", item))
                else:
                    result[-1] += "" if item is None else str(item)
                concat = False
            elif _is_sequence(item):
                result.append(self._split(item, pattern))
            else:
                fragments = split_with_delimiter("" if item is None else str(item), pattern)
                result.extend(fragments or [""])
                # the last fragment is a delimiter and gets the boundary
                concat = len(fragments) % 2 == 0 and len(fragments) > 0
        return result


#: Splits on two or more line breaks, with blanks between them.
RULE_CONSECUTIVE_LINEBREAKS = ParseRule(
    re.compile('({0}(?:{0}|{1})*{0})'.format(LINEBREAK_PATTERN, BLANK)),
    "ConsecutiveLbs").freeze()

#: Splits on every line break including the whitespace around it, and on
#: leading and trailing whitespace.
RULE_EACH_LINE_STRIP = ParseRule(re.compile(r'(\A\s+|\s*\n\s*|\s+\Z)'), "EachLineStrip").freeze()

#: The rule used by :meth:`~.part.Part.parse` by default.
DEFAULT_RULE = RULE_CONSECUTIVE_LINEBREAKS

