import unittest, io, os
from unittest import mock
from PmcppTest import PmcppTest
from pmcpp.Main import main, buildArgParser, byteStream, argText

class MainTest(PmcppTest):

  def test_standardInput(self):
    (code, out, err) = self.runPmcpp([], '#define X y\nX\n')
    self.assertEqual((code, out, err), (0, '# 1 "<stdin>"\n\ny\n', ''))

  def test_shellStyle(self):
    (code, out, err) = self.runPmcpp(['-s'], '# comment\n%define X y\nX\n')
    self.assertEqual((code, out, err), (0, '# comment\ny\n', ''))

  def test_defineOptions(self):
    (code, out, err) = self.runPmcpp(['-s', '-D', 'X="hello world"', '--define', 'Y'], 'X\n%ifdef Y\nyes\n%endif\n')
    self.assertEqual((code, out), (0, 'hello world\nyes\n'))

  def test_defineOptionErrorNamesArgument(self):
    (code, out, err) = self.runPmcpp(['-s', '-D', 'A=1', '-D', 'X=hello world'], 'X\n')
    self.assertEqual(code, 1)
    self.assertEqual(out, '')
    self.assertEqual(err, 'pmcpp: <arg>[2]: %define X hello world\npmcpp: Error: Unexpected extra text in a control line\n')

  def test_restrict(self):
    (code, out, err) = self.runPmcpp(['-r', '-D', 'FOO=baz'], '#{FOO}bar\n#FOO\n##\n')
    self.assertEqual((code, out), (0, '# 1 "<stdin>"\nbazbar\nbaz\n##\n'))

  def test_inputFile(self):
    path = self.write('root.pmns', '#include "pmcpp-test-sub"\nroot\n')
    sub = self.write('pmcpp-test-sub', 'sub\n')
    (code, out, err) = self.runPmcpp([path])
    self.assertEqual(code, 0)
    self.assertEqual(out, '# 1 "%s"\n# 1 "%s"\nsub\n# 2 "%s"\nroot\n' % (path, sub, path))

  def test_nonUtf8BytesPassThrough(self):
    sub = self.write('latin1-sub', b'%define Y \xe0\xff\nY X\n')
    path = self.write('latin1.pmns', b'%define X caf\xe9\n%include "latin1-sub"\nX\n')
    (code, out, err) = self.runPmcpp(['-s', path])
    self.assertEqual((code, out, err), (0, '\xe0\xff caf\xe9\ncaf\xe9\n', ''))

  def test_nonUtf8BytesInErrorReport(self):
    path = self.write('latin1-bad.pmns', b'%endif \xe9\n')
    (code, out, err) = self.runPmcpp(['-s', path])
    self.assertEqual(code, 1)
    self.assertEqual(err, 'pmcpp: %s[1]: %%endif \xe9\npmcpp: Error: Unexpected extra text in a control line\n' % (path))

  def test_carriageReturnDoesNotEndALine(self):
    path = self.write('cr.pmns', b'a\rb\n%endif\n')
    (code, out, err) = self.runPmcpp(['-s', path])
    self.assertEqual(code, 1)
    self.assertEqual(out, 'a\rb\n')
    self.assertEqual(err, 'pmcpp: %s[2]: %%endif\npmcpp: Error: No matching %%ifdef or %%ifndef for %%endif\n' % (path))

  def test_byteStreamReadsAndWritesBytesUnchanged(self):
    stdin = byteStream(io.TextIOWrapper(io.BytesIO(b'caf\xe9\rx\r\n'), encoding='utf-8'))
    self.assertEqual(stdin.readline(), 'caf\xe9\rx\r\n')
    stdout = byteStream(io.TextIOWrapper(io.BytesIO(), encoding='utf-8'))
    stdout.write('caf\xe9\r\n')
    stdout.flush()
    self.assertEqual(stdout.buffer.getvalue(), b'caf\xe9\r\n')

  def test_argTextKeepsCommandLineBytes(self):
    self.assertEqual(argText('X=y'), 'X=y')
    self.assertEqual(argText('X=caf\xe9').encode('latin-1'), os.fsencode('X=caf\xe9'))

  def test_missingInputFile(self):
    path = os.path.join(self.directory, 'missing.pmns')
    (code, out, err) = self.runPmcpp([path])
    self.assertEqual(code, 1)
    self.assertEqual(err, 'pmcpp: %s:\npmcpp: Error: No such file or directory\n' % (path))

  def test_directoryIsNotAnInputFile(self):
    (code, out, err) = self.runPmcpp([self.directory])
    self.assertEqual(code, 1)
    self.assertIn('pmcpp: Error:', err)

  def test_errorReportsFileLineAndText(self):
    (code, out, err) = self.runPmcpp(['-s'], 'ok\n%endif   \n')
    self.assertEqual(code, 1)
    self.assertEqual(out, 'ok\n')
    self.assertEqual(err, 'pmcpp: <stdin>[2]: %endif   \npmcpp: Error: No matching %ifdef or %ifndef for %endif\n')

  def test_endOfInputError(self):
    (code, out, err) = self.runPmcpp(['-s'], '%ifdef X\n')
    self.assertEqual(code, 1)
    self.assertEqual(err, 'pmcpp: <stdin>:\npmcpp: Error: End of input and no matching %endif for %ifdef or %ifndef at line 1\n')

  def test_debugTrace(self):
    (code, out, err) = self.runPmcpp(['-s', '-d'], '%define A x\nA\n')
    self.assertEqual(code, 0)
    self.assertEqual(out, '<<macro A="x"\n<<name="A"\n<<value="x"\nx\n<<lines: in 2 out 1 (modified 1) substitutions: 1\n')

  def test_tooManyArguments(self):
    (code, out, err) = self.runPmcpp(['a', 'b'])
    self.assertEqual(code, 1)
    self.assertIn('usage: pmcpp', err)

  def test_unknownOption(self):
    (code, out, err) = self.runPmcpp(['-x'])
    self.assertEqual(code, 1)
    self.assertIn('usage: pmcpp', err)

  def test_help(self):
    stdout = io.StringIO()
    with mock.patch('sys.stdout', stdout):
      with self.assertRaises(SystemExit) as context:
        main(['-?'], io.StringIO(), io.StringIO(), io.StringIO())
    self.assertEqual(context.exception.code, 0)
    self.assertIn('--restrict', stdout.getvalue())

  def test_argParserDefaults(self):
    cli = buildArgParser().parse_args([])
    self.assertEqual((cli.file, cli.defines, cli.restrict, cli.shell, cli.debug), (None, [], False, False, False))

if __name__ == '__main__':
  unittest.main()
