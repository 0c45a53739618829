from random import Random

from pytest import Item, fixture

from calcinput.engine import Engine


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases. Needs enable_assertion_pass_hook=true.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def engine() -> Engine:
    return Engine()


@fixture
def seeded() -> Random:
    '''
    Same draws on every run.
    '''
    return Random(20201019)
