import ply.lex as lex


# RESERVED WORDS
# Keys are lower case, so commands are case-insensitive ('BALANCE' == 'balance')

reserved = {
    'balance': 'BALANCE',
    'insert': 'INSERT',
    'stock': 'STOCK',
    'change': 'CHANGE',
    'purchase': 'PURCHASE',
    'reload': 'RELOAD',
    'help': 'HELP',
    'clear': 'CLEAR',
    'exit': 'EXIT',
}


# TOKEN LIST

tokens = ['COIN', 'WORD'] + list(reserved.values())


# TOKEN RULES

t_ignore = ' \t\r\n'

# Coin labels: currency prefix ('£2') or minor-unit suffix ('50p').
# Whether the label names a real denomination is decided later.
def t_COIN(t):
    r'(?:£\d+|\d+[pP])(?=\s|$)'
    return t

# Anything else up to the next blank: product names, options, junk
def t_WORD(t):
    r'\S+'
    t.type = reserved.get(t.value.lower(), 'WORD')
    return t

def t_error(t):
    t.lexer.skip(1)


lexer = lex.lex()
