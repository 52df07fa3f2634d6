
class TraversalBase(object):
    def __init__(self):
        super(TraversalBase, self).__init__()
        self.nodes = []

    def traverse(self, ast):

        self.scan(ast)

    def scan(self, node):

        self.nodes = [(node, None)]

        while self.nodes:
            # process nodes in the order they are discovered. (DFS)
            node, parent = self.nodes.pop()

            self.visit(node, parent)

            for child in reversed(list(node.children())):
                self.nodes.append((child, node))

    def visit(self, node, parent):
        raise NotImplementedError()
