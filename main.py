import sys, getopt
import numpy as np

import utils.limits as limits
import utils.utils as u
import play

# -h: help
# -n: narrow (32-bit) subset indices for power sets
# -s: silent (suppresses printing)

def main(argv):

    try: opts, args = getopt.getopt(argv,'hns',[])
    except getopt.GetoptError:
        print('usage: main.py -h -n -s')
        sys.exit(2)

    for opt, arg in opts:
        if   opt == '-n':
            limits.set_32bit_index()
        elif opt == '-s':
            u.set_silent()
        else: # covers -h
            print('usage: main.py -h -n -s')
            sys.exit()

if __name__ == '__main__':
    main(sys.argv[1:])

    ram = u.system_RAM_GB()

    u.show('\nFinite sets, multi-sets and the algebra of sets')
    u.show(f'RAM {ram:.2f} GB, numpy {np.__version__}')
    u.show(f'power sets of up to {limits.max_n} elements ({limits.index_bits}-bit indices)')

    play.play()
