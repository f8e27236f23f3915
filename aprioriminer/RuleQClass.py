# ############################# Class RuleQElem/RuleQClass #############################
class RuleQElem:
    def __init__(self, rule):
        self.rule = rule

    @staticmethod
    def rqeGreater(rqe):
        return rqe.rule.confidence


class RuleQClass(list):
    """Rules waiting to be ordered on confidence; equal confidences keep generation order."""

    def __init__(self):
        list.__init__(self)

    def append(self, rule):
        new_ruleQElem = RuleQElem(rule)
        super(RuleQClass, self).append(new_ruleQElem)

    def sort(self):
        # sorted() is stable under reverse=True, so ties stay in generation order
        return sorted(self, key=RuleQElem.rqeGreater, reverse=True)

    def rules(self):
        return [rqe.rule for rqe in self.sort()]
