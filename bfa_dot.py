# SPDX-FileCopyrightText: 2024 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
import subprocess


def symbol_runs(symbols):
    '''Label a sorted list of symbols compactly: runs of 4 or more become e.g. "3-C", shorter runs are spelled out.'''
    parts = []
    run_start = prev = None
    for s in symbols + [None]:
        if run_start is not None and s == prev + 1:
            prev = s
            continue
        if run_start is not None:
            if prev - run_start >= 3:
                parts.append(f'{run_start:X}-{prev:X}')
            else:
                parts.extend(f'{x:X}' for x in range(run_start, prev + 1))
        run_start = prev = s
    return ''.join(parts)


def dot(automaton):
    lines = ['digraph G {', '    rankdir=LR;', '    start [shape=point];', f'    start -> {automaton.start};']
    for q in automaton.states():
        attrs = []
        if automaton.is_sealed(q):
            attrs.append('shape=box')
        if automaton.is_final(q):
            attrs.append('peripheries=2')
        attrs.append(f'tooltip="{automaton.configuration(q)}"')
        lines.append(f'    {q} [{", ".join(attrs)}];')
    for q in automaton.states():
        by_target = {}
        for s, t in enumerate(automaton.transitions(q)):
            by_target.setdefault(t, []).append(s)
        for t, symbols in sorted(by_target.items()):
            lines.append(f'    {q} -> {t} [label="{symbol_runs(symbols)}"];')
    lines.append('}')
    return '\n'.join(lines) + '\n'


def save_dot(automaton, filename):
    with open(filename, 'w') as f:
        f.write(dot(automaton))


def render_png(dot_path):
    subprocess.check_call(['dot', '-Tpng', '-O', dot_path])
    return f'{dot_path}.png'


def show_png(png_path):
    from PIL import ImageShow
    ImageShow._viewers[0].show_file(png_path)
