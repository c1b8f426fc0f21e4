"""
Chemical computation tools for the RInChI toolkit.

- inchi_parser:  InChI parsing with LRU caching and RDKit reaction
                 construction from decomposed RInChIs
"""
