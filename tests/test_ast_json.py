import json

import pytest

from nova.ast_json import ast_from_obj, program_from_obj, program_to_obj
from nova.parser import parse_program


def test_round_trip_through_json():
    source = '''
    var a = 1;
    for (var i = 0; i < 2; i = i + 1) {
        if (i == 0 and !false) print "zero"; else a = -a;
    }
    print (a + 1) * clock() or nil;
    '''
    statements = parse_program(source)
    text = json.dumps(program_to_obj(statements))
    assert program_from_obj(json.loads(text)) == statements


def test_tokens_are_plain_objects():
    obj = program_to_obj(parse_program('print x;'))
    assert obj['body'][0]['expression']['name'] == {
        'kind': 'IDENTIFIER', 'lexeme': 'x', 'literal': None, 'line': 1,
    }


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'Lambda'})


def test_root_must_be_program():
    with pytest.raises(ValueError):
        program_from_obj({'type': 'Block', 'body': []})
