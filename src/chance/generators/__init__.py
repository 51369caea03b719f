"""Generator mixins composed into :class:`chance.Chance`.

Each module groups one family of generators.  All of them draw exclusively
through ``self.random()`` (usually via ``natural``/``integer``/``pick``), so
the order of calls alone determines the output for a seeded instance.
"""
