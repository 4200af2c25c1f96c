import re

from pmcpp.Token import Token, TEXT, NAME
from pmcpp.Logger import Factory as LoggerFactory

def wholeName(match):
  return match.group(0)

def innerName(match):
  return match.group('braced') or match.group('bare')

def unrestrictedGrammar(ctl):
  return [
    ( re.compile(r'[A-Za-z_][A-Za-z0-9_]*'), NAME, wholeName )
  ]

# -r: only CTLname and CTL{name} are candidates
def restrictedGrammar(ctl):
  return [
    ( re.compile(r'%s(?:\{(?P<braced>[A-Za-z0-9_]+)\}|(?P<bare>[A-Za-z0-9_]+))' % (re.escape(ctl))), NAME, innerName )
  ]

class Lexer:
  def __init__(self, regex):
    self.__dict__.update(locals())

  def match(self, string, pos=0):
    best = None
    for (regex, terminal, function) in self.regex:
      match = regex.search(string, pos)
      if match and (best is None or match.start() < best[0].start()):
        best = (match, terminal, function)
    return best

  # Split a line into candidate tokens and the text between them
  def tokenize(self, string):
    tokens = []
    pos = 0
    while pos < len(string):
      best = self.match(string, pos)
      if best is None:
        tokens.append(Token(TEXT, string[pos:]))
        break
      (match, terminal, function) = best
      if match.start() > pos:
        tokens.append(Token(TEXT, string[pos:match.start()]))
      tokens.append(Token(terminal, match.group(0), function(match)))
      pos = match.end()
    return tokens

class Substituter:
  def __init__(self, macros, restrict=False, ctl='#', logger=None):
    self.__dict__.update(locals())
    if self.logger is None:
      self.logger = LoggerFactory().getModuleLogger(__name__)
    grammar = restrictedGrammar(ctl) if restrict else unrestrictedGrammar(ctl)
    self.lexer = Lexer(grammar)

  # Replace each candidate token by its macro value, once.  Inserted text is
  # never rescanned.  The original line is returned when nothing matched.
  def substitute(self, line):
    count = 0
    output = []
    for token in self.lexer.tokenize(line):
      if not token.isCandidate():
        output.append(token.getString())
        continue
      self.logger.debug('name="%s"' % (token.getString()))
      value = self.macros.lookup(token.getName())
      if value is None:
        output.append(token.getString())
        continue
      self.logger.debug('value="%s"' % (value))
      output.append(value)
      count += 1
    if count == 0:
      return (line, 0)
    return (''.join(output), count)
