from pmcpp.MacroTable import MacroTable
from pmcpp.Directive import DirectiveEngine, isInclude, parseInclude, \
    SUPPRESS, NOT_A_DIRECTIVE
from pmcpp.Lexer import Substituter
from pmcpp.IncludeStack import IncludeStack, IncludePath, MAXLEVEL
from pmcpp.Comment import stripComments, checkClosed
from pmcpp.SourceCode import SourceCodeString
from pmcpp.Exceptions import PreProcessorError, UnrecognizedDirectiveError, \
    UnterminatedConditionalError
from pmcpp.Logger import Factory as LoggerFactory

STYLE_C = 1
STYLE_SH = 2

class Factory:
  def create(self, restrict=False, shell=False, topLevel=None, varDir=None, logger=None, maxDepth=MAXLEVEL):
    if logger is None:
      logger = LoggerFactory().getProgramLogger()
    includePath = IncludePath(topLevel, varDir)
    state = PreProcessorState(MacroTable(), IncludeStack(includePath, maxDepth))
    return PreProcessor(state, restrict=restrict, style=STYLE_SH if shell else STYLE_C, logger=logger)

class Stats:
  def __init__(self):
    self.linesIn = 0
    self.linesOut = 0
    self.linesSubstituted = 0
    self.substitutions = 0

  def __str__(self):
    return 'lines: in %d out %d (modified %d) substitutions: %d' % (self.linesIn, self.linesOut, self.linesSubstituted, self.substitutions)

# All mutable state for one run
class PreProcessorState:
  def __init__(self, macros, includes):
    self.__dict__.update(locals())
    self.stats = Stats()
    self.inComment = 0
    self.skipping = False

class PreProcessor:
  def __init__(self, state, restrict=False, style=STYLE_C, logger=None):
    self.__dict__.update(locals())
    if self.logger is None:
      self.logger = LoggerFactory().getProgramLogger()
    self.ctl = '%' if style == STYLE_SH else '#'
    self.directives = DirectiveEngine(state.macros, self.ctl, logger)
    self.substituter = Substituter(state.macros, restrict, self.ctl, logger)

  @property
  def macros(self):
    return self.state.macros

  @property
  def stats(self):
    return self.state.stats

  def annotate(self):
    return self.style == STYLE_C

  def marker(self, frame):
    return '# %d "%s"\n' % (frame.getLine() + 1, frame.getResource())

  # Pre-seed a macro from name[=value], exactly as a define line would
  def define(self, text, resource='<arg>', lineno=0):
    line = '%cdefine %s\n' % (self.ctl, text.replace('=', ' ', 1))
    try:
      self.directives.run(line, lineno)
    except PreProcessorError as error:
      raise error.locate(resource, lineno, line)

  def process(self, sourceFile):
    state = self.state
    includes = state.includes
    includes.push(sourceFile)
    top = sourceFile
    try:
      if self.annotate():
        yield self._emit(self.marker(top))
      while True:
        (raw, resumed) = includes.readLine()
        if resumed:
          if self.annotate():
            yield self._emit(self.marker(includes.current))
          continue
        if raw is None:
          break
        state.stats.linesIn += 1
        frame = includes.current
        try:
          output = self._processLine(raw, frame)
        except PreProcessorError as error:
          raise error.locate(frame.getResource(), frame.getLine(), raw)
        if output is not None:
          yield self._emit(output)
      self._finish(top)
      self.logger.debug(str(state.stats))
    finally:
      includes.close()

  def processString(self, string, resource='<string>'):
    return ''.join(self.process(SourceCodeString(resource, string)))

  def _emit(self, line):
    self.state.stats.linesOut += 1
    return line

  def _blank(self):
    return '\n' if self.annotate() else None

  def _processLine(self, raw, frame):
    state = self.state
    (line, state.inComment) = stripComments(raw, state.inComment, frame.getLine())
    if state.inComment and line == '\n':
      return self._blank()

    if line[0] == self.ctl:
      if isInclude(line, self.ctl):
        if state.skipping:
          return self._blank()
        fname = parseInclude(line, self.ctl)
        pushed = state.includes.pushInclude(fname, self.ctl)
        return self.marker(pushed) if self.annotate() else None
      result = self.directives.run(line, frame.getLine())
      if result != NOT_A_DIRECTIVE:
        state.skipping = (result == SUPPRESS)
        return self._blank()
      if not self.restrict:
        raise UnrecognizedDirectiveError('Unrecognized control line')
      # -r: #name or #{name} at the start of a line is ordinary content

    if state.skipping:
      return self._blank()
    if len(self.macros):
      (line, count) = self.substituter.substitute(line)
      if count:
        state.stats.linesSubstituted += 1
        state.stats.substitutions += count
    return line

  def _finish(self, top):
    checkClosed(self.state.inComment, top.getResource())
    if self.directives.isOpen():
      ctl = self.ctl
      raise UnterminatedConditionalError('End of input and no matching %cendif for %cifdef or %cifndef at line %d' % (ctl, ctl, ctl, self.directives.conditionalLine), top.getResource(), 0)
