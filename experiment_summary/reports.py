# patterns and ratio definitions of the three report types
#
# slots of the cache patterns:
#   0 P, 1 Fu(P)                         from the "WithOUT comp." block
#   2 Co(P), 3 Fu(Co(P)), 4 Dfs(Fu(Co(P)))  from the following "With comp." block

from experiment_summary.summary import MetricGroup, Pattern, RatioDefinition

# one numeric field; anything up to the next comma or blank so that
# malformed values surface as a ParseError instead of a missed match
FIELD = r'([^,\s]*)'


def cache_pattern(metric):
    return Pattern(metric, r'''
        WithOUT\ comp\. .*?
            {m}\ =\ {f},\ \#\[Fusioned\]{m}\ =\ {f} .*?
        With\ comp\. .*?
            {m}\ =\ {f},\ \#\[Fusioned\]{m}\ =\ {f},\ \#\[Fusioned&Scheduled\]{m}\ =\ {f}
        '''.format(m=metric, f=FIELD), 5)


CACHE_RATIOS = [
    RatioDefinition('Co(P)/P', 2, 0),
    RatioDefinition('Fu(P)/P', 1, 0),
    RatioDefinition('Fu(Co(P))/Co(P)', 3, 2),
    RatioDefinition('Dfs(Fu(Co(P)))/Co(P)', 4, 2),
]

CACHE = [
    MetricGroup('NVar', cache_pattern('Variables'), CACHE_RATIOS),
    MetricGroup('CCap', cache_pattern('Capacity'), CACHE_RATIOS),
]

# 0 P, 1 Fu(P), 2 Co(P), 3 Fu(Co(P))
MEMACC_PATTERN = Pattern('MemAcc', r'''
    WithOUT\ comp\. .*?
        MemAcc\ =\ {f},\ \#\[Fusioned\]MemAcc\ =\ {f} .*?
    With\ comp\. .*?
        MemAcc\ =\ {f} .*?,\ \#\[Fusioned\]MemAcc\ =\ {f}
    '''.format(f=FIELD), 4)

MEMACC = [
    MetricGroup('MemAcc', MEMACC_PATTERN, [
        RatioDefinition('Co(P)/P', 2, 0),
        RatioDefinition('Fu(P)/P', 1, 0),
        RatioDefinition('Fu(Co(P))/Co(P)', 3, 2),
        RatioDefinition('Fu(Co(P))/P', 3, 0),
    ]),
]

# 0 no compression, 1 RePair, 2 XorRePair
COMP_COMPARE_PATTERN = Pattern('XOR', r'''
    \[NoComp\]\ \#XOR\ =\ {f} .*?
    \#XOR\ =\ {f} .*?
    \#XOR\ =\ {f}
    '''.format(f=FIELD), 3)

COMP_COMPARE = [
    MetricGroup('XOR', COMP_COMPARE_PATTERN, [
        RatioDefinition('Repair(P)/P', 1, 0),
        RatioDefinition('XorRepair(P)/P', 2, 0),
    ]),
]

REPORTS = {
    'cache': CACHE,
    'memacc': MEMACC,
    'comp-compare': COMP_COMPARE,
}

DESCRIPTIONS = {
    'cache': 'average variable count and cache capacity ratios with and without compression',
    'memacc': 'average memory access ratios with and without compression and fusion',
    'comp-compare': 'average XOR count of RePair and XorRePair relative to no compression',
}


def get_report(name):
    try:
        return REPORTS[name]
    except KeyError:
        raise KeyError('unknown report {!r}, expected one of {}'.format(
            name, ', '.join(sorted(REPORTS)))) from None
