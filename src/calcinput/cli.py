from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
from random import Random
import logging

from prompt_toolkit import PromptSession

from .converter import Converter
from .engine import Engine
from .generator import FormulaGenerator
from .lexer import Lexer
from .result import InvalidValue, Value
from .util import CalcError


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the formula engine.
    '''

    DEFAULT_PROMPT = '= '
    # Shown in place of a value for formulas that don't evaluate.
    INVALID_GLYPH = '?'

    def format(self, result):
        '''
        Render result for output: number, placeholder, or blank.
        '''
        if isinstance(result, Value):
            return '{:g}'.format(result.value)
        elif isinstance(result, InvalidValue):
            return self.INVALID_GLYPH
        else:
            return ''

    def dumper(self):
        '''
        Dump tokens and postfix of every line.
        '''
        lexer = Lexer()
        converter = Converter()
        print('<tokens>\t<postfix>')
        for line in self.args.expressions:
            line = line.rstrip('\n')
            try:
                tokens = list(lexer.lex(line))
                postfix = converter.to_postfix(tokens)
            except CalcError as e:
                print(e.args[0], file=stderr)
                continue
            print(' '.join(map(str, tokens)),
                  ' '.join(map(str, postfix)),
                  sep='\t')

    def executor(self):
        '''
        Evaluate every line, printing its value.
        '''
        engine = Engine()
        for line in self.args.expressions:
            result = engine.set_text(line.rstrip('\n'))
            if engine.message is not None:
                print(engine.message, file=stderr)
            print(self.format(result), flush=self._interactive())

    def generator(self):
        '''
        Print generated formulas, alongside their values.
        '''
        generator = FormulaGenerator(max_operands=self.args.operands,
                                     max_depth=self.args.depth,
                                     max_number=self.args.max_number,
                                     fixed_digits=self.args.digits,
                                     random=Random(self.args.seed))
        engine = Engine()
        for _ in range(self.args.generate):
            formula = generator.generate()
            print(formula, self.format(engine.set_text(formula)), sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Formula calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        main_groups.add_argument('-g', '--generate', type=int, metavar='N',
                                 help='print N random formulas')
        generation = self.argument_parser.add_argument_group(
            'generation', 'Options for --generate')
        generation.add_argument('--seed', type=int)
        generation.add_argument('--depth', type=int,
                                default=FormulaGenerator.DEFAULT_MAX_DEPTH)
        generation.add_argument('--operands', type=int,
                                default=FormulaGenerator.DEFAULT_MAX_OPERANDS)
        generation.add_argument('--max-number', type=float,
                                default=FormulaGenerator.DEFAULT_MAX_NUMBER)
        generation.add_argument('--digits', type=int,
                                default=FormulaGenerator.DEFAULT_FIXED_DIGITS)
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(name)s: %(message)s')
        if self.args.generate is not None:
            self.args.action = self.generator
        elif self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
