from os import isatty, path
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .converter import Converter
from .operands import OperandRegistry
from .util import RPNError, ConversionError, wrap_user_errors


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=self.history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix converter and evaluator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.infixrpn_history'

    INVALID = 'The infix expression is not valid!'
    UNDEFINED = 'The expression cannot be evaluated mathematically!'

    def _lines(self):
        '''
        Yield non-blank input lines, stripped.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if line:
                yield line

    def _convert(self, line):
        '''
        Convert line, reporting why it couldn't be on stderr.

        Returns RPN, None if not valid.
        '''
        try:
            ok, rpn = self.converter.convert(line)
        except ConversionError as e:
            print(e.args[0], file=sys.stderr)
            ok = False
        if not ok:
            print(self.INVALID)
            return None
        return rpn

    def converter_only(self):
        '''
        Print RPN of each expression.
        '''
        for line in self._lines():
            rpn = self._convert(line)
            if rpn is not None:
                print('RPN expression:', *rpn)

    def dumper(self):
        '''
        Dump all resolved tokens, type, and arity.
        '''
        print('<type>\t<repr(text)>\t<arity>')
        for line in self._lines():
            try:
                tokens = [self.converter.resolver.classify(lexeme)
                          for lexeme
                          in self.converter.lexer.tokenize(line)]
                for token in self.converter.resolver.resolve(tokens):
                    print(token.type.value,
                          repr(token.text),
                          self.machine.arity(token.text),
                          sep='\t')
            except ConversionError as e:
                print(e.args[0], file=sys.stderr)

    def executor(self):
        '''
        Convert and evaluate each expression.
        '''
        for line in self._lines():
            rpn = self._convert(line)
            if rpn is None:
                continue
            print('RPN expression:', *rpn)
            defined, value = self.machine.evaluate(rpn)
            if defined:
                print('Evaluation of RPN expression:', value)
            else:
                print(self.UNDEFINED)

    @wrap_user_errors('Bad variable {1!r}, expected name=value')
    def _parse_assignment(self, assignment):
        '''
        Split name=value into name and float value.
        '''
        name, value = assignment.split('=')
        return name.strip(), float(value)

    def _set_operands(self):
        '''
        Register operands given on command line.
        '''
        for assignment in self.args.operands or ():
            name, value = self._parse_assignment(assignment)
            if not self.operands.add(name, value):
                raise RPNError('Invalid variable {!r}'.format(name))

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return sys.stdin

    def __init__(self, operands=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.

        :param operands: Operand registry, fresh if not given.
        '''
        self.operands = OperandRegistry() if operands is None else operands
        self.converter = Converter(operands=self.operands)
        self.machine = self.converter.machine
        self.argument_parser = ArgumentParser(
            description='Infix to RPN converter and evaluator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-s', '--set',
                                          action='append',
                                          metavar='NAME=VALUE',
                                          dest='operands')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-c', '--convert',
                                       self.converter_only),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            stream=sys.stderr)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self._set_operands()
            self.args.action()
        except RPNError as e:
            print(e.args[0], file=sys.stderr)
            sys.exit(2)
        except KeyboardInterrupt:
            sys.exit(1)
