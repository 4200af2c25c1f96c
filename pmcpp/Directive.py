from pmcpp.MacroTable import nameRegex
from pmcpp.Comment import whitespace
from pmcpp.Exceptions import MissingNameError, IllegalCharError, UnterminatedValueError, \
    TrailingTextError, UnmatchedConditionalError, NestedConditionalError, MalformedIncludeError
from pmcpp.Logger import Factory as LoggerFactory

# values returned by DirectiveEngine.run()
CONTINUE = 0
SUPPRESS = 1
NOT_A_DIRECTIVE = -1

# conditional state
IF_FALSE = 0
IF_TRUE = 1
IF_NONE = 2

DEFINE = 'define'
UNDEF = 'undef'
IFDEF = 'ifdef'
IFNDEF = 'ifndef'
ENDIF = 'endif'
ELSE = 'else'
INCLUDE = 'include'

# matched as plain prefixes of the text after the control character, in this order
keywords = [DEFINE, UNDEF, IFDEF, IFNDEF, ENDIF, ELSE]

blanks = ' \t'

def skipBlanks(text, pos):
  while pos < len(text) and text[pos] in blanks:
    pos += 1
  return pos

def isInclude(line, ctl):
  return line[:1] == ctl and line.startswith(INCLUDE, 1)

def parseInclude(line, ctl):
  text = line.rstrip('\n')
  pos = skipBlanks(text, 1 + len(INCLUDE))
  if pos >= len(text) or text[pos] not in '"<':
    raise MalformedIncludeError('Expected " or < after %cinclude' % (ctl))
  close = '"' if text[pos] == '"' else '>'
  end = text.find(close, pos + 1)
  if end < 0:
    raise MalformedIncludeError('Expected %s after file name' % (close))
  if end + 1 < len(text):
    raise TrailingTextError('Unexpected extra text in %cinclude line' % (ctl))
  return text[pos+1:end]

class Directive:
  def __init__(self, op, name=None, value=None):
    self.__dict__.update(locals())

class DirectiveEngine:
  def __init__(self, macros, ctl='#', logger=None):
    self.__dict__.update(locals())
    if self.logger is None:
      self.logger = LoggerFactory().getModuleLogger(__name__)
    self.conditional = IF_NONE
    self.conditionalLine = 0

  def parse(self, line):
    text = line.rstrip('\n')
    if text[:1] != self.ctl:
      return None
    for keyword in keywords:
      if text.startswith(keyword, 1):
        op = keyword
        break
    else:
      return None

    name = None
    value = None
    pos = skipBlanks(text, 1 + len(op))
    if op not in (ENDIF, ELSE):
      if pos >= len(text):
        raise MissingNameError('Missing macro name')
      match = nameRegex.match(text, pos)
      end = match.end() if match else pos
      if end < len(text) and text[end] not in whitespace:
        raise IllegalCharError('Illegal character in macro name')
      if end == pos:
        raise MissingNameError('Missing macro name')
      name = text[pos:end]
      pos = end
      if op == DEFINE:
        (value, pos) = self._parseValue(text, pos)
        self.logger.debug('macro %s="%s"' % (name, value))

    pos = skipBlanks(text, pos)
    if pos < len(text):
      raise TrailingTextError('Unexpected extra text in a control line')
    return Directive(op, name, value)

  def _parseValue(self, text, pos):
    pos = skipBlanks(text, pos)
    if pos >= len(text):
      return ('', pos)
    if text[pos] in '\'"':
      quote = text[pos]
      end = text.find(quote, pos + 1)
      if end < 0:
        raise UnterminatedValueError('Unterminated value string in %cdefine' % (self.ctl))
      return (text[pos+1:end], end + 1)
    end = pos
    while end < len(text) and text[end] not in whitespace:
      end += 1
    return (text[pos:end], end)

  def run(self, line, lineno=0):
    directive = self.parse(line)
    if directive is None:
      return NOT_A_DIRECTIVE
    ctl = self.ctl
    op = directive.op

    if op == ENDIF:
      if self.conditional == IF_NONE:
        raise UnmatchedConditionalError('No matching %cifdef or %cifndef for %cendif' % (ctl, ctl, ctl))
      self.conditional = IF_NONE
      return CONTINUE
    if op == ELSE:
      if self.conditional == IF_NONE:
        raise UnmatchedConditionalError('No matching %cifdef or %cifndef for %celse' % (ctl, ctl, ctl))
      self.conditional = IF_TRUE if self.conditional == IF_FALSE else IF_FALSE
      return SUPPRESS if self.conditional == IF_FALSE else CONTINUE
    if op in (IFDEF, IFNDEF) and self.conditional != IF_NONE:
      raise NestedConditionalError('Nested %cifdef or %cifndef' % (ctl, ctl))

    # inside a false block, waiting for else or endif
    if self.conditional == IF_FALSE:
      return SUPPRESS

    if op in (IFDEF, IFNDEF):
      found = self.macros.isDefined(directive.name)
      self.conditional = IF_TRUE if found == (op == IFDEF) else IF_FALSE
      self.conditionalLine = lineno
      return SUPPRESS if self.conditional == IF_FALSE else CONTINUE
    if op == UNDEF:
      self.macros.undef(directive.name)
      return CONTINUE
    self.macros.define(directive.name, directive.value)
    return CONTINUE

  def suppressing(self):
    return self.conditional == IF_FALSE

  def isOpen(self):
    return self.conditional != IF_NONE
