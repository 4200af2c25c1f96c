import sys, os, argparse

from xtermcolor.ColorMap import XTermColorMap

from pmcpp.PreProcessor import Factory as PreProcessorFactory
from pmcpp.SourceCode import SourceFile, SourceStream, ENCODING, NEWLINE
from pmcpp.IncludeStack import openFile
from pmcpp.Exceptions import PreProcessorError, CannotOpenError
from pmcpp.Logger import Factory as LoggerFactory

class UsageError(Exception):
  pass

class ArgumentParser(argparse.ArgumentParser):
  def error(self, message):
    raise UsageError(message)

def buildArgParser():
  parser = ArgumentParser(prog='pmcpp', description='pmcpp: simple preprocessor for PMNS files', add_help=False)
  parser.add_argument('-?', '-h', '--help',
              action='help',
              help = 'Show this help message and exit')

  parser.add_argument('-d', '--debug',
              action='store_true',
              help = 'Writes debug information')

  parser.add_argument('-D', '--define',
              dest = 'defines',
              action = 'append',
              default = [],
              metavar = 'NAME=VALUE',
              help = 'Associate a value with a macro name')

  parser.add_argument('-r', '--restrict',
              action='store_true',
              help = 'Restrict macro expansion to #name or #{name}')

  parser.add_argument('-s', '--shell',
              action='store_true',
              help = 'Use alternate control syntax with %% instead of #')

  parser.add_argument('file',
              metavar = 'FILE',
              nargs = '?',
              help = 'Input file, standard input when omitted')
  return parser

def reportError(error, stdout, stderr):
  stdout.flush()
  message = error.toString()
  if hasattr(stderr, 'isatty') and stderr.isatty():
    message = message.replace('Error:', XTermColorMap().colorize('Error:', 0xff0000), 1)
  stderr.write(message + '\n')
  stderr.flush()

def openInput(path, stdin):
  if path is None:
    return SourceStream(stdin)
  fp = openFile(path)
  if fp is None:
    if os.path.isdir(path):
      reason = 'Is a directory'
    elif os.path.exists(path):
      reason = 'Not a regular file or not readable'
    else:
      reason = 'No such file or directory'
    raise CannotOpenError(reason, path, 0)
  return SourceFile(path, fp)

# Switch a standard stream to the same byte-for-character codec as the
# input files, with no newline translation.
def byteStream(stream, errors='strict'):
  if hasattr(stream, 'reconfigure'):
    stream.reconfigure(encoding=ENCODING, errors=errors, newline=NEWLINE)
  return stream

# Command line text as the bytes the user typed, one character per byte
def argText(arg):
  return os.fsencode(arg).decode(ENCODING)

def main(argv=None, stdin=None, stdout=None, stderr=None):
  if argv is None:
    argv = sys.argv[1:]
    textOf = argText
  else:
    textOf = str
  stdin = byteStream(sys.stdin) if stdin is None else stdin
  stdout = byteStream(sys.stdout) if stdout is None else stdout
  stderr = byteStream(sys.stderr, 'backslashreplace') if stderr is None else stderr

  parser = buildArgParser()
  try:
    cli = parser.parse_args(argv)
  except UsageError as error:
    stderr.write('pmcpp: %s\n' % (error))
    stderr.write(parser.format_usage())
    return 1

  logger = LoggerFactory().initialize(cli.debug, stdout)
  cPPFactory = PreProcessorFactory()

  try:
    cPP = cPPFactory.create(restrict=cli.restrict, shell=cli.shell, topLevel=cli.file, logger=logger)
    for (index, define) in enumerate(cli.defines):
      cPP.define(textOf(define), '<arg>', index + 1)
    source = openInput(cli.file, stdin)
    for line in cPP.process(source):
      stdout.write(line)
  except PreProcessorError as error:
    reportError(error, stdout, stderr)
    return 1
  except MemoryError:
    reportError(PreProcessorError('Out of memory'), stdout, stderr)
    return 1
  stdout.flush()
  return 0

def Cli():
  sys.exit(main())

if __name__ == '__main__':
  Cli()
