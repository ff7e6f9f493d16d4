from inspect import stack
from psutil import virtual_memory

"""
Various utilities
"""

verbose = True # can be set by command line

# verbose and silent modes
# code uses show() instead of print() which adheres to verbose/silent modes
def set_verbose():
    global verbose
    verbose = True

def set_silent():
    global verbose
    verbose = False

# print only if verbose is True
def show(*args,**kwargs):
    if verbose: print(*args,**kwargs)


""" errors raised when a function input fails a test """

# elements of incompatible types (the element type of a set is fixed)
class TypeMismatch(TypeError):
    pass

# power set that cannot be indexed or cannot fit in memory
class ResourceLimit(MemoryError):
    pass

# raises error with a message that identifies the calling function and line
# if function input fails a test
def input_check(assertion,message,error=TypeMismatch):
    if not assertion:
        frame        = stack()[2] # skipping frame for 'input_check'
        fname        = frame[1]
        line_no      = frame[2]
        code_context = frame[4]
        current_line = code_context[frame[5]].strip() if code_context else ''
        raise error(f'\nINPUT ERROR:\n  File \'{fname}\', line {line_no}'
                    f'\n  {current_line}\n  {message}')

# prints a warning message
def warning(cond,message):
    if verbose and cond: print(f'warning: {message}')

# returns system memory in GB
def system_RAM_GB():
    mem = virtual_memory()
    return mem.total/(1024**3)

# joins elements of itr with s separators
# if fn is supplied, joins fn(element) instead
def unpack(itr,fn=str,s=' '):
    return s.join(fn(i) for i in itr)
