"""Tour data model, scheduler, blackboard, navigation goal server and behaviour-tree leaves for a tour-guide robot."""

__version__ = "0.1.0"