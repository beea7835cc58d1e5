"""
Database link enrichment.

ChEBI exports cross-references as bare identifiers under properties such
as ``KEGG COMPOUND Database Links``. This table turns them into full
database URLs. PubChem references are re-targeted by their ``CID:`` or
``SID:`` prefix.
"""

__all__ = ["LinkRule", "LINK_RULES", "PUBCHEM_RULES", "PUBCHEM_PROPERTY", "enrich"]

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class LinkRule:
    """How to turn a raw identifier into a URL."""

    prefix: str
    suffix: str = ""
    strip: int = 0
    space: Optional[str] = None
    target: Optional[str] = None

    def apply(self, value: str) -> str:
        """
        Build the URL for a value.

        Example:
            >>> LinkRule("https://www.ebi.ac.uk/chebi/searchId.do?chebiId=", strip=6).apply("CHEBI:15365")
            'https://www.ebi.ac.uk/chebi/searchId.do?chebiId=15365'
        """
        ident = value[self.strip :]
        if self.space is not None:
            ident = ident.replace(" ", self.space)
        return f"{self.prefix}{ident}{self.suffix}"


_KEGG = "http://www.genome.jp/dbget-bin/www_bget?"

LINK_RULES = MappingProxyType(
    {
        "Agricola Citation Links": LinkRule(
            "https://agricola.nal.usda.gov/cgi-bin/Pwebrecon.cgi?Search_Arg=",
            suffix="&DB=local&CNT=25&Search_Code=GKEY%5E&STARTDB=AGRIDB",
        ),
        "ArrayExpress Database Links": LinkRule(
            "https://www.ebi.ac.uk/arrayexpress/experiments/"
        ),
        "BioModels Database Links": LinkRule("https://www.ebi.ac.uk/biomodels-main/"),
        "ChEBI ID": LinkRule(
            "https://www.ebi.ac.uk/chebi/searchId.do?chebiId=", strip=len("CHEBI:")
        ),
        "DrugBank Database Links": LinkRule("https://www.drugbank.ca/drugs/"),
        "ECMDB Database Links": LinkRule("http://ecmdb.ca/compounds/"),
        "HMDB Database Links": LinkRule("http://www.hmdb.ca/metabolites/"),
        "IntAct Database Links": LinkRule("https://www.ebi.ac.uk/intact/interaction/"),
        "IntEnz Database Links": LinkRule(
            "http://www.ebi.ac.uk/intenz/query?q=", space="+"
        ),
        "KEGG COMPOUND Database Links": LinkRule(_KEGG + "cpd:"),
        "KEGG DRUG Database Links": LinkRule(_KEGG + "dr:"),
        "KEGG GLYCAN Database Links": LinkRule(_KEGG + "gl:"),
        "KNApSAcK Database Links": LinkRule(
            "http://kanaya.naist.jp/knapsack_jsp/information.jsp?word="
        ),
        "LIPID MAPS instance Database Links": LinkRule(
            "http://www.lipidmaps.org/data/LMSDRecord.php?LMID="
        ),
        "MetaCyc Database Links": LinkRule(
            "https://metacyc.org/compound?orgid=META&id="
        ),
        "Patent Database Links": LinkRule(
            "https://worldwide.espacenet.com/searchResults?query="
        ),
        "PDBeChem Database Links": LinkRule(
            "http://www.ebi.ac.uk/pdbe-srv/pdbechem/chemicalCompound/show/"
        ),
        "PubMed Central Citation Links": LinkRule(
            "https://www.ncbi.nlm.nih.gov/pmc/articles/", suffix="/"
        ),
        "PubMed Citation Links": LinkRule(
            "https://www.ncbi.nlm.nih.gov/pubmed/?term="
        ),
        "Reactome Database Links": LinkRule("https://reactome.org/content/detail/"),
        "RESID Database Links": LinkRule("http://pir.georgetown.edu/cgi-bin/resid?id="),
        "Rhea Database Links": LinkRule("https://www.rhea-db.org/reaction?id="),
        "SABIO-RK Database Links": LinkRule(
            "http://sabio.h-its.org/reacdetails.jsp?reactid="
        ),
        "UM-BBD compID Database Links": LinkRule(
            "http://eawag-bbd.ethz.ch/servlets/pageservlet?ptype=c&compID="
        ),
        "UniProt Database Links": LinkRule("https://www.uniprot.org/uniprot/"),
        "Wikipedia Database Links": LinkRule("https://en.wikipedia.org/wiki/"),
        "YMDB Database Links": LinkRule("http://www.ymdb.ca/compounds/"),
    }
)

PUBCHEM_PROPERTY = "PubChem Database Links"

# Keyed by the first three characters of the value ("CID: 123")
PUBCHEM_RULES = MappingProxyType(
    {
        "CID": LinkRule(
            "https://pubchem.ncbi.nlm.nih.gov/compound/",
            strip=len("CID: "),
            target="PubChem Database Molecule Links",
        ),
        "SID": LinkRule(
            "https://pubchem.ncbi.nlm.nih.gov/substance/",
            strip=len("SID: "),
            target="PubChem Database Substance Links",
        ),
    }
)


def enrich(name: str, value: str) -> List[Tuple[str, str]]:
    """
    Rewrite a property value into a database URL.

    Args:
        name: Property name the value belongs to
        value: Raw property value

    Returns:
        ``(property name, value)`` pairs to store: one pair in general,
        none for PubChem values without a known prefix. Unknown property
        names keep the raw value.

    Example:
        >>> enrich("KEGG COMPOUND Database Links", "C00001")
        [('KEGG COMPOUND Database Links', 'http://www.genome.jp/dbget-bin/www_bget?cpd:C00001')]
        >>> enrich("PubChem Database Links", "SID: 7")
        [('PubChem Database Substance Links', 'https://pubchem.ncbi.nlm.nih.gov/substance/7')]
        >>> enrich("Star", "3")
        [('Star', '3')]
    """
    if name == PUBCHEM_PROPERTY:
        rule = PUBCHEM_RULES.get(value[:3])
        if rule is None:
            return []
        return [(rule.target, rule.apply(value))]

    rule = LINK_RULES.get(name)
    if rule is None:
        return [(name, value)]
    return [(name, rule.apply(value))]
