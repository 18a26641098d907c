import matplotlib

# no display in the test environment
matplotlib.use('Agg')

import pytest


# output of the benchmark binary for one encoding matrix, without and with compression
ALL_STAT_BLOCK = """\
[WithOUT comp.] #XOR = {xor}, #MemAcc = {mem_p}, #[Fusioned]MemAcc = {mem_fu_p},
  #[NoFusion]CacheTrans = 10, #[Fusioned]CacheTrans = 8, #[Fusioned&Scheduled]CacheTrans = 6,
  #[NoFusion]Variables = {var_p}, #[Fusioned]Variables = {var_fu_p}, #[Fusioned&Scheduled]Variables = 30,
  #[NoFusion]Capacity = {cap_p}, #[Fusioned]Capacity = {cap_fu_p}, #[Fusioned&Scheduled]Capacity = 5,
  #Statements = 12
[With comp.] #XOR = {xor}, #MemAcc = {mem_co_p}, #[Fusioned]MemAcc = {mem_fu_co_p},
  #[NoFusion]CacheTrans = 10, #[Fusioned]CacheTrans = 8, #[Fusioned&Scheduled]CacheTrans = 6,
  #[NoFusion]Variables = {var_co_p}, #[Fusioned]Variables = {var_fu_co_p}, #[Fusioned&Scheduled]Variables = {var_dfs},
  #[NoFusion]Capacity = {cap_co_p}, #[Fusioned]Capacity = {cap_fu_co_p}, #[Fusioned&Scheduled]Capacity = {cap_dfs},
  #Statements = 9
"""


def all_stat_block(**overrides):
    values = dict(xor=50,
                  mem_p=200, mem_fu_p=100, mem_co_p=160, mem_fu_co_p=80,
                  var_p=100, var_fu_p=50, var_co_p=100, var_fu_co_p=40, var_dfs=20,
                  cap_p=10, cap_fu_p=8, cap_co_p=8, cap_fu_co_p=4, cap_dfs=2)
    values.update(overrides)
    return ALL_STAT_BLOCK.format(**values)


@pytest.fixture
def write_log(tmp_path):
    def write(text, name='bench.log'):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return write
