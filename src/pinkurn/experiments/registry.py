from pinkurn.processes import IIDBernoulli, UrnProcess

PROCESS_REGISTRY = {
    "iid_bernoulli": IIDBernoulli,
    "pink_urn": UrnProcess,
}
