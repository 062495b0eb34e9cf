# -*- coding: utf-8 -*-
#
# Markov Logic Networks
#
# (C) 2012-2015 by Daniel Nyga (nyga@cs.uni-bremen.de)
# (C) 2006-2011 by Dominik Jain (jain@cs.tum.edu)
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

# weight of ground constraints produced by hard clauses
HARD_WEIGHT = 1e6

# annotation truth values
TRUE = 'TRUE'
FALSE = 'FALSE'
UNKNOWN = 'UNKNOWN'

# states of the cutting-plane learner
INIT = 'INIT'
ITERATING = 'ITERATING'
CONVERGED = 'CONVERGED'
MAX_ITERS_REACHED = 'MAX_ITERS_REACHED'

HAMMING = 'hamming'
LOSS_FUNCTIONS = (HAMMING,)

# output colors
comment_color = (None, 'green', False)
predicate_color = (None, 'white', True)
weight_color = (None, 'cyan', True)
