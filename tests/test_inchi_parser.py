"""
Tests for InChI parsing and RDKit reaction construction
"""

import unittest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rdkit import Chem

from rinchi import decompose
from rinchi.chem.inchi_parser import (
    clear_cache,
    inchi_to_smiles,
    parse_inchi,
    reaction_from_decomposition,
    reaction_smiles_from_decomposition,
)
from rinchi.common.errors import ChemistryError


METHANE = "CH4/h1H4"
WATER = "H2O/h1H2"
ETHANOL = "C2H6O/c1-2-3/h3H,2H2,1H3"
SULFURIC_ACID = "H2O4S/c1-5(2,3)4/h(H2,1,2,3,4)"


class TestParseInchi(unittest.TestCase):
    """Test InChI parsing"""

    def setUp(self):
        clear_cache()

    def test_empty(self):
        self.assertIsNone(parse_inchi(""))

    def test_invalid(self):
        self.assertIsNone(parse_inchi("not an inchi"))

    def test_ethanol(self):
        mol = parse_inchi("InChI=1S/" + ETHANOL)
        self.assertIsNotNone(mol)
        self.assertEqual(mol.GetNumAtoms(), 3)

    def test_cached(self):
        first = parse_inchi("InChI=1S/" + WATER)
        self.assertIs(parse_inchi("InChI=1S/" + WATER), first)

    def test_to_smiles(self):
        self.assertEqual(inchi_to_smiles("InChI=1S/" + ETHANOL), "CCO")
        self.assertEqual(inchi_to_smiles("InChI=1S/" + METHANE), "C")
        self.assertEqual(inchi_to_smiles(""), "")


class TestReactionFromDecomposition(unittest.TestCase):
    """Test reaction construction from decomposed components"""

    RINCHI = "RInChI=1.00.1S/" + METHANE + "<>" + WATER + "<>" + SULFURIC_ACID + "/d+"

    def test_templates(self):
        rxn = reaction_from_decomposition(decompose(self.RINCHI))
        self.assertEqual(rxn.GetNumReactantTemplates(), 1)
        self.assertEqual(rxn.GetNumProductTemplates(), 1)
        self.assertEqual(rxn.GetNumAgentTemplates(), 1)

    def test_reaction_smiles(self):
        smiles = reaction_smiles_from_decomposition(decompose(self.RINCHI))
        reactants, agents, products = smiles.split(">")
        self.assertEqual(Chem.CanonSmiles(reactants), "C")
        self.assertEqual(Chem.CanonSmiles(products), "O")
        self.assertEqual(Chem.CanonSmiles(agents), Chem.CanonSmiles("OS(=O)(=O)O"))

    def test_backward_reaction(self):
        result = decompose("RInChI=1.00.1S/" + METHANE + "<>" + WATER + "/d-")
        smiles = reaction_smiles_from_decomposition(result)
        reactants, _, products = smiles.split(">")
        self.assertEqual(Chem.CanonSmiles(reactants), "O")
        self.assertEqual(Chem.CanonSmiles(products), "C")

    def test_failed_decomposition(self):
        with self.assertRaises(ChemistryError) as ctx:
            reaction_from_decomposition(decompose("garbage"))
        self.assertEqual(ctx.exception.code, "INVALID_DECOMPOSITION")

    def test_unparsable_component(self):
        with self.assertRaises(ChemistryError) as ctx:
            reaction_from_decomposition(decompose("RInChI=1.00.1S/xyz<>" + WATER))
        self.assertEqual(ctx.exception.code, "INVALID_INCHI")


if __name__ == "__main__":
    unittest.main()
