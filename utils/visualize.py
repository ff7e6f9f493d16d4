from graphviz import Digraph

from sets.cset import Set
import utils.utils as u

"""
Visualizing the subset lattice of a set using graphviz
"""

# -Hasse diagram of the power set of s: an edge goes from subset X to subset Y
#  when Y adds a single element to X (n * 2^(n-1) edges for n elements)
# -subsets of equal cardinality are drawn on the same rank, empty set at the bottom
# -returns the Digraph, which is rendered into fname only if render is True
def hasse(s,fname='hasse.gv',render=False,view=False):
    subsets = list(s.power_set())
    subsets.sort(key=lambda x: x.cardinality)
    index   = {x:i for i,x in enumerate(subsets)}

    g = Digraph('hasse', filename=fname)
    g.attr(rankdir='BT')
    g.attr('node', fontsize='16')
    g.attr('node', shape='plaintext')

    name  = lambda x: f'{index[x]}'
    label = lambda x: '{' + u.unpack(sorted(x,key=repr),str,', ') + '}' if x.is_not_empty else '&#8709;'

    for card in range(s.cardinality+1):
        with g.subgraph() as r:
            r.attr(rank='same')
            for x in subsets:
                if x.cardinality == card: r.node(name(x),label=label(x))

    for x in subsets:
        for e in s:
            if e in x: continue
            y = x | Set([e],etype=s.etype)
            g.edge(name(x),name(y),arrowhead='none')

    if render:
        g.render(fname,view=view)
    return g
