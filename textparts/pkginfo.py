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


"""
Meta-information about the textparts package.

The version must match the one in pyproject.toml.

"""

import collections

Version = collections.namedtuple("Version", "major minor patch")


#: name of the package
name = "textparts"

#: the current version
version = Version(0, 9, 0)
version_suffix = ""
#: the current version as a string
version_string = "{}.{}.{}".format(*version) + version_suffix

#: short description
description = "Reversible paragraph and boundary structures for plain text"

#: long description
long_description = \
    "The textparts package parses plain text into a tree of alternating " \
    "paragraphs and boundaries that joins back into exactly the original " \
    "text, and provides operations to edit the tree safely."

#: maintainer name
maintainer = "Wilbert Berendsen"

#: maintainer email
maintainer_email = "info@wilbertberendsen.nl"

#: license
license = "GPL v3"

