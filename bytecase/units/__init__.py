"""
This package contains all bytecase units. A unit is a class that transforms a buffer of bytes; every
unit is also an executable that can be used from the command line, reading its input from stdin and
writing the result to stdout. For example, the unit `bytecase.units.strings.clower` lowercases its
input:

    $ printf 'STRASSE' | clower
    strasse

Units can be used in Python code just as well. They can be called with their input, or they can be
connected to inputs and outputs using the `|` operator:

    >>> from bytecase import clower, ctitle
    >>> clower('ascii')(B'ABC')
    bytearray(b'abc')
    >>> B'STRASSE' | ctitle | str
    'Strasse'

On the right hand side of `|`, a unit receives the output of the left side as its input. A literal
ellipsis (`...`) returns the raw output as a `bytearray`, any other callable receives the output as
its only argument, and `None` runs the unit and discards the result. The type `str` is special: it
decodes the output as UTF-8.

### Writing Units

The command line interface of a unit is generated from the signature of its constructor. Every
parameter has to be annotated with a `bytecase.units.Arg`, which holds the arguments that are
forwarded to `argparse.ArgumentParser.add_argument`. The constructor passes its parameters on to
the base class as keywords, and they become available as members of `args`:

    class prefix(Unit):
        def __init__(self, prefix: Arg(type=str, help='This is prepended to the input.')):
            super().__init__(prefix=prefix)
        def process(self, data):
            return self.args.prefix.encode(self.codec) + data
"""
from __future__ import annotations

import abc
import copy
import inspect
import sys

from argparse import OPTIONAL, Namespace
from typing import TYPE_CHECKING, Any, BinaryIO, Callable, Dict, Tuple

from bytecase.lib.argparser import ArgparseError, ArgumentParser
from bytecase.lib.environment import Logger, LogLevel, environment, logger
from bytecase.lib.exceptions import BytecaseCriticalException, BytecaseException, BytecasePotentialUserError
from bytecase.lib.tools import documentation, exception_to_string
from bytecase.lib.types import buf, isbuffer

if TYPE_CHECKING:
    from typing import Self


class Entry:
    """
    Marks a unit that is available as a command. The `bytecase.units.Executable` metaclass adds it
    to the bases of every unit that is not abstract.
    """


class Arg:
    """
    The annotation for a unit constructor parameter. Positional arguments are the option strings,
    keyword arguments are passed to `add_argument` unchanged. Without option strings, the parameter
    becomes a positional argument of the command line.
    """
    __slots__ = 'flags', 'options'

    flags: Tuple[str, ...]
    options: Dict[str, Any]

    def __init__(self, *flags: str, **options):
        self.flags = flags
        self.options = options

    @classmethod
    def Choice(cls, *flags: str, choices, metavar=None, type=str, help=None) -> Arg:
        """
        An argument that accepts one of the given choices. The placeholder `{choices}` in the help
        text is replaced by the comma-separated list of choices.
        """
        options = dict(choices=list(choices), type=type)
        if metavar is not None:
            options.update(metavar=metavar)
        if help is not None:
            options.update(help=help)
        return cls(*flags, **options)

    @property
    def positional(self) -> bool:
        return not self.flags

    def help(self) -> str | None:
        text = self.options.get('help')
        if text is None or 'choices' not in self.options:
            return text
        return text.replace('{choices}', ', '.join(map(str, self.options['choices'])))

    def register(self, parser: ArgumentParser, name: str, default=inspect.Parameter.empty):
        """
        Add this argument for the constructor parameter `name` to the given parser.
        """
        options = dict(self.options)
        options.update(help=self.help())
        if default is not inspect.Parameter.empty:
            options.setdefault('default', default)
            if self.positional:
                options.setdefault('nargs', OPTIONAL)
        if self.positional:
            return parser.add_argument(name, **options)
        return parser.add_argument(*self.flags, dest=name, **options)

    def __repr__(self):
        arguments = [repr(flag) for flag in self.flags]
        arguments.extend(F'{key}={value!r}' for key, value in self.options.items())
        return F'{self.__class__.__name__}({", ".join(arguments)})'


class Executable(abc.ABCMeta):
    """
    The metaclass of all units. It collects the `bytecase.units.Arg` annotations of the constructor
    when the class is created, and a unit class that is defined in the `__main__` module runs
    immediately.
    """

    def __new__(mcs, name, bases, namespace, abstract=False):
        if not abstract and Entry not in bases:
            bases = bases + (Entry,)
        return super().__new__(mcs, name, bases, namespace)

    def __init__(cls, name, bases, namespace, abstract=False):
        super().__init__(name, bases, namespace)
        cls._arguments = cls._collect_arguments()
        if not abstract and cls.__module__ == '__main__':
            cls.run()

    def _collect_arguments(cls) -> Dict[str, Tuple[Arg, Any]]:
        arguments = {}
        scope = vars(sys.modules[cls.__module__])
        parameters = inspect.signature(cls.__init__).parameters
        for parameter in list(parameters.values())[1:]:
            if parameter.kind in (parameter.VAR_KEYWORD, parameter.VAR_POSITIONAL):
                continue
            annotation = parameter.annotation
            if isinstance(annotation, str):
                annotation = eval(annotation, scope)
            if not isinstance(annotation, Arg):
                raise BytecaseCriticalException(
                    F'parameter {parameter.name} of unit {cls.__name__} is not annotated with an Arg')
            arguments[parameter.name] = annotation, parameter.default
        return arguments

    def __or__(cls, other):
        return cls().__or__(other)

    def __ror__(cls, other) -> Unit:
        return cls().__ror__(other)

    @property
    def codec(cls) -> str:
        """
        The codec that is used to convert between text and bytes; it is always UTF-8.
        """
        return 'UTF8'

    @property
    def name(cls) -> str:
        """
        The command name of the unit, which is the name of its class.
        """
        return cls.__name__

    @property
    def logger(cls) -> Logger:
        try:
            return cls.__dict__['_logger']
        except KeyError:
            cls._logger = result = logger(cls.name)
            return result


class Unit(metaclass=Executable, abstract=True):
    """
    The base class for all bytecase units. A unit reads its whole input, passes it to the `process`
    method, and stores the result. It also provides the options `--quiet`, `--devnull`, and
    `--verbose` that are common to all units.
    """

    args: Namespace

    def __init__(self, **keywords):
        self.args = Namespace(quiet=False, devnull=False, verbose=0)
        vars(self.args).update(keywords)
        self._source = None
        self._result = None
        self.log_detach()

    def __copy__(self):
        cls = self.__class__
        clone = cls.__new__(cls)
        clone.__dict__.update(self.__dict__)
        clone.args = copy.copy(self.args)
        clone._source = None
        clone._result = None
        return clone

    @property
    def codec(self) -> str:
        return self.__class__.codec

    @property
    def name(self) -> str:
        return self.__class__.name

    @property
    def logger(self) -> Logger:
        return self.__class__.logger

    @property
    def log_level(self) -> LogLevel:
        """
        The current log level of the unit; `--quiet` forces it to `bytecase.lib.environment.LogLevel.NONE`.
        """
        if self.args.quiet:
            return LogLevel.NONE
        return LogLevel(self.logger.getEffectiveLevel())

    @log_level.setter
    def log_level(self, value: int | LogLevel):
        if not isinstance(value, LogLevel):
            value = LogLevel.from_verbosity(value)
        self.logger.setLevel(value)

    def log_detach(self) -> Self:
        """
        Detach the unit from its logger. A detached unit raises every exception to the caller, which
        is the default for units that are created in code. Units that are assembled from a command
        line log their errors instead.
        """
        self.log_level = LogLevel.DETACHED
        return self

    def _log(self, level: LogLevel, messages) -> bool:
        enabled = self.logger.isEnabledFor(level)
        if enabled and messages:
            self.logger.log(level, self._output(*messages))
        return enabled

    def log_fail(self, *messages) -> bool:
        return self._log(LogLevel.ERROR, messages)

    def log_warn(self, *messages) -> bool:
        return self._log(LogLevel.WARNING, messages)

    def log_info(self, *messages) -> bool:
        return self._log(LogLevel.INFO, messages)

    def log_debug(self, *messages) -> bool:
        """
        Log the messages at debug level. Without messages, this only returns whether debug output is
        enabled. Messages can be callables, which are only evaluated when the message is logged.
        """
        return self._log(LogLevel.DEBUG, messages)

    @classmethod
    def _output(cls, *messages) -> str:
        def render(message) -> str:
            if callable(message):
                message = message()
            if isinstance(message, BaseException):
                return exception_to_string(message)
            if isbuffer(message):
                text = bytes(message).decode(cls.codec, 'surrogateescape')
                return text if text.isprintable() else bytes(message).hex().upper()
            return str(message)
        return ' '.join(render(message) for message in messages)

    def _exception_handler(self, exception: Exception):
        if self.log_level >= LogLevel.DETACHED or isinstance(exception, BytecaseCriticalException):
            raise exception
        if isinstance(exception, BytecasePotentialUserError):
            self.log_warn(exception)
        elif isinstance(exception, BytecaseException):
            self.log_fail(exception)
        else:
            self.log_fail(F'exception of type {exception.__class__.__name__}:', exception)
        if self.log_debug():
            import traceback
            traceback.print_exc(file=sys.stderr)

    @abc.abstractmethod
    def process(self, data: bytearray) -> buf | None:
        """
        Implemented by every unit: receives the complete input and returns the output.
        """

    def _read_source(self) -> bytearray:
        source = self._source
        if source is None:
            return bytearray()
        if isinstance(source, Unit):
            return source.output()
        if isbuffer(source):
            return bytearray(source)
        return bytearray(source.read())

    def output(self) -> bytearray:
        """
        Process the input of the unit and return the result; it is computed only once.
        """
        if self._result is None:
            data = self._read_source()
            try:
                result = self.process(data)
            except Exception as E:
                self._exception_handler(E)
                result = None
            if result is None:
                result = bytearray()
            elif not isinstance(result, bytearray):
                result = bytearray(result)
            self._result = result
        return self._result

    def __call__(self, data: buf | str | None = None) -> bytearray:
        unit = copy.copy(self)
        return unit.__ror__(data).output()

    def __ror__(self, source: Unit | BinaryIO | buf | str | None) -> Self:
        if isinstance(source, str):
            source = source.encode(self.codec)
        self._source = source
        self._result = None
        return self

    def __or__(self, other: Unit | type[Unit] | Callable | None):
        if other is None:
            self.output()
            return None
        if isinstance(other, type) and issubclass(other, Entry):
            other = other()
        if isinstance(other, Unit):
            return copy.copy(other).__ror__(self)
        if other is ...:
            return self.output()
        if other is str:
            return self.output().decode(self.codec)
        if callable(other):
            return other(self.output())
        raise TypeError(F'unable to connect {self.name} to an object of type {type(other).__name__}')

    def __str__(self):
        return self | str

    def __bytes__(self):
        return self | bytes

    @classmethod
    def argparser(cls) -> ArgumentParser:
        parser = ArgumentParser(prog=cls.name, description=documentation(cls), add_help=False)
        generic = parser.add_argument_group('generic options')
        generic.add_argument('-h', '--help', action='help', help='Show this help message and exit.')
        generic.add_argument('-Q', '--quiet', action='store_true', help='Disables all log output.')
        generic.add_argument('-0', '--devnull', action='store_true', help='Do not produce any output.')
        generic.add_argument('-v', '--verbose', action='count', default=0,
            help='Specify up to two times to increase log level.')
        for name, (argument, default) in cls._arguments.items():
            argument.register(parser, name, default)
        return parser

    @classmethod
    def assemble(cls, *argv: str, **keywords) -> Unit:
        """
        Create a unit from command line arguments. Keywords replace the defaults of the parser, so
        they take effect unless the same argument also appears in `argv`. An invalid argument
        raises `bytecase.lib.argparser.ArgparseError`.
        """
        parser = cls.argparser()
        parser.set_defaults(**keywords)
        parsed = vars(parser.parse_args(list(argv)))
        generic = {key: parsed.pop(key) for key in ('quiet', 'devnull', 'verbose')}
        try:
            unit = cls(**parsed)
        except ValueError as E:
            parser.error(str(E))
        vars(unit.args).update(generic)
        unit.log_level = LogLevel.NONE if unit.args.quiet else unit.args.verbose
        return unit

    @classmethod
    def run(cls, argv=None, stream: BinaryIO | None = None) -> None:
        """
        Execute the unit as a command: Read all of the given stream or stdin, process it, and write
        the result to stdout.
        """
        argv = sys.argv[1:] if argv is None else argv
        try:
            unit = cls.assemble(*argv)
        except ArgparseError as error:
            error.parser.exit_with_error(str(error))
            return
        except Exception as error:
            cls.logger.critical(cls._output('initialization failed:', error))
            return
        if environment.verbosity.value is not None:
            unit.log_level = environment.verbosity.value
        if stream is None:
            stream = None if sys.stdin.isatty() else sys.stdin.buffer
        try:
            unit.__ror__(stream)
            output = unit.output()
            if not unit.args.devnull:
                sys.stdout.buffer.write(output)
                sys.stdout.buffer.flush()
        except KeyboardInterrupt:
            unit.log_warn('aborting due to keyboard interrupt')
        except BrokenPipeError:
            unit.log_debug('output stream was closed')


__all__ = [
    'Arg',
    'Entry',
    'Executable',
    'LogLevel',
    'Unit',
]
