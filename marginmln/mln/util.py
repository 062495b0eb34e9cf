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
import sys
import time

from logutils.colorize import ColorizingStreamHandler

from marginmln import mlnlog


logger = mlnlog.logger(__name__)


def ifnone(value, default, transform=None):
    '''
    Returns `default` if `value` is None, otherwise `value`, optionally
    passed through `transform`.
    '''
    if value is None:
        return default
    if transform is not None:
        return transform(value)
    return value


def colorize(message, format, color=False):
    '''
    Returns the given message in a colorized format
    string with ANSI escape codes for colorized console outputs:
    - message:   the message to be formatted.
    - format:    triple containing format information:
                 (bg-color, fg-color, bf-boolean) supported colors are
                 'black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'
    - color:     boolean determining whether or not the colorization
                 is to be actually performed.
    '''
    if color is False: return message
    handler = ColorizingStreamHandler(sys.stdout)
    params = []
    (bg, fg, bold) = format
    if bg in handler.color_map:
        params.append(str(handler.color_map[bg] + 40))
    if fg in handler.color_map:
        params.append(str(handler.color_map[fg] + 30))
    if bold:
        params.append('1')
    if params:
        message = ''.join((handler.csi, ';'.join(params),
                           'm', message, handler.reset))
    return message


def headline(s):
    line = ''.ljust(len(s), '=')
    return '%s\n%s\n%s' % (line, s, line)


def fmtweight(w):
    '''
    Formats a real-valued weight with at most 12 decimal places and
    no trailing zeros, e.g. 1.5, -0.25 or 3.
    '''
    s = ('%.12f' % w).rstrip('0').rstrip('.')
    if s in ('', '-0'):
        return '0'
    return s


class StopWatchTag(object):

    def __init__(self, label, starttime, stoptime=None):
        self.label = label
        self.starttime = starttime
        self.stoptime = stoptime

    @property
    def elapsedtime(self):
        return ifnone(self.stoptime, time.time()) - self.starttime


class StopWatch(object):
    '''
    Simple tagging of time spans.
    '''

    def __init__(self):
        self.tags = {}
        self._order = []

    def tag(self, label, verbose=False):
        if verbose:
            logger.info('%s...' % label)
        tag = self.tags.get(label)
        now = time.time()
        if tag is None:
            tag = StopWatchTag(label, now)
            self._order.append(label)
        else:
            tag.starttime = now
            tag.stoptime = None
        self.tags[label] = tag

    def finish(self, label=None):
        now = time.time()
        if label is None:
            for tag in self.tags.values():
                if tag.stoptime is None:
                    tag.stoptime = now
        else:
            self.tags[label].stoptime = now

    def __getitem__(self, label):
        return self.tags[label]

    def printSteps(self):
        for label in self._order:
            t = self.tags[label]
            logger.info('%s took %.3f sec.' % (t.label, t.elapsedtime))
