from enum import Flag


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE = 0
    TYPE = 1 << 0


DEFAULT_COMPLIANT = Compliant.NONE
