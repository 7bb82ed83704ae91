from typing import NamedTuple, Optional, Tuple

import ply.yacc as yacc

from .lex import tokens, lexer


class Command(NamedTuple):
    name: str
    arguments: Tuple[str, ...] = ()

    @property
    def argument(self) -> Optional[str]:
        """First argument, the only one the machine ever looks at"""
        return self.arguments[0] if self.arguments else None


class CommandError(Exception):
    pass


# COMMAND STRUCTURE

def p_command(p):
    '''command : keyword arguments'''
    p[0] = Command(p[1], tuple(p[2]))


def p_keyword(p):
    '''keyword : BALANCE
               | INSERT
               | STOCK
               | CHANGE
               | PURCHASE
               | RELOAD
               | HELP
               | CLEAR
               | EXIT'''
    p[0] = p.slice[1].type.lower()


# ARGUMENTS
# Keywords are valid arguments too, as in 'reload change'

def p_arguments(p):
    '''arguments : arguments argument
                 | empty'''
    if len(p) == 2:
        p[0] = []
    else:
        p[0] = p[1] + [p[2]]


def p_argument(p):
    '''argument : COIN
                | WORD
                | BALANCE
                | INSERT
                | STOCK
                | CHANGE
                | PURCHASE
                | RELOAD
                | HELP
                | CLEAR
                | EXIT'''
    p[0] = p[1]


def p_empty(p):
    '''empty :'''
    pass


# ERRORS

def p_error(p):
    if p:
        raise CommandError(f"Unexpected '{p.value}' at position {p.lexpos}")
    raise CommandError("Empty command")


parser = yacc.yacc(debug=False, write_tables=False)


def parse_command(line: str) -> Command:
    return parser.parse(line, lexer=lexer)
