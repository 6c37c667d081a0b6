# -*- coding: utf-8 -*-
#
# This file is part of `scoretree`, a browser for in-memory score hierarchies
#
# Copyright © 2026 by the scoretree developers
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
Makes ``python -m scoretree FILE`` work.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
