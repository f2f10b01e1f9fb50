def pmts(v, type_, extra_information=""):
    """Poor man's type system"""
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        type_.__name__,
        type(v).__name__,
        "" if not extra_information else "; %s" % extra_information
        )


def pmts_path(v, extra_information=""):
    """Poor man's type system for paths: a list of non-negative ints"""
    pmts(v, list, extra_information)
    for i in v:
        pmts(i, int, extra_information)
        assert i >= 0, "Negative index in path %s%s" % (v, "" if not extra_information else "; %s" % extra_information)
