"""Unit tests for search configuration and planning."""

import unittest

from reflecttreelib import (
    FailFastPolicy,
    InvalidSearchConfigError,
    ObjectAdapter,
    RecursivePreOrderTraverser,
    SearchConfig,
    SearchPlan,
    SkipUnreflectablePolicy,
    TraversalStrategy,
)
from reflecttreelib.core import LabelMatcher, TypeMatcher


class TestSearchConfig(unittest.TestCase):

    def test_defaults_are_valid(self):
        config = SearchConfig()
        self.assertEqual(config.validate(), [])
        self.assertEqual(config.strategy, TraversalStrategy.ITERATIVE)
        self.assertIsNone(config.max_depth)

    def test_negative_max_depth(self):
        self.assertIn("max_depth cannot be negative", SearchConfig(max_depth=-1).validate())

    def test_non_integer_max_depth(self):
        self.assertIn("max_depth must be an integer", SearchConfig(max_depth=True).validate())
        self.assertIn("max_depth must be an integer", SearchConfig(max_depth=2.5).validate())

    def test_custom_strategy_needs_traverser(self):
        errors = SearchConfig(strategy=TraversalStrategy.CUSTOM).validate()
        self.assertIn("custom_traverser required when strategy is CUSTOM", errors)

    def test_unknown_strategy(self):
        errors = SearchConfig(strategy="bfs").validate()
        self.assertEqual(len(errors), 1)
        self.assertIn("unknown strategy", errors[0])

    def test_error_policy_needs_handle(self):
        self.assertIn(
            "error_policy must provide a handle() method",
            SearchConfig(error_policy=object()).validate(),
        )

    def test_convenience_constructors(self):
        self.assertEqual(SearchConfig.shallow().max_depth, 1)
        self.assertEqual(SearchConfig.shallow(3).max_depth, 3)
        self.assertIsInstance(SearchConfig.strict().error_policy, FailFastPolicy)


class TestSearchPlan(unittest.TestCase):

    def test_invalid_config_raises(self):
        with self.assertRaises(InvalidSearchConfigError) as ctx:
            SearchPlan(SearchConfig(max_depth=-5))
        self.assertIn("max_depth cannot be negative", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_default_adapter_gets_policy(self):
        policy = FailFastPolicy()
        plan = SearchPlan(SearchConfig(error_policy=policy))
        self.assertIsInstance(plan.adapter, ObjectAdapter)
        self.assertIs(plan.adapter.error_policy, policy)

    def test_given_adapter_keeps_its_policy(self):
        adapter = ObjectAdapter()
        plan = SearchPlan(SearchConfig(error_policy=FailFastPolicy()), adapter)
        self.assertIs(plan.adapter, adapter)
        self.assertIsInstance(adapter.error_policy, SkipUnreflectablePolicy)

    def test_custom_traverser(self):
        adapter = ObjectAdapter()
        traverser = RecursivePreOrderTraverser(adapter)
        plan = SearchPlan(
            SearchConfig(strategy=TraversalStrategy.CUSTOM, custom_traverser=traverser),
            adapter,
        )
        self.assertIs(plan.traverser, traverser)
        self.assertEqual(plan.find_first({"k": "v"}, TypeMatcher(str)), "v")

    def test_plan_is_reusable(self):
        plan = SearchPlan()
        tree = {"a": {"b": 1}, "c": 2}
        self.assertEqual(plan.find_first(tree, LabelMatcher("c")).payload, 2)
        self.assertEqual(plan.find_first(tree, LabelMatcher("b")).payload, 1)
        self.assertEqual(list(plan.find_all(tree, TypeMatcher(int))), [1, 2])
        self.assertEqual(plan.group_members((1,))[0].payload, 1)

    def test_summary(self):
        summary = SearchPlan(SearchConfig(max_depth=4)).get_summary()
        self.assertEqual(summary['strategy'], 'iterative')
        self.assertEqual(summary['max_depth'], 4)
        self.assertEqual(summary['adapter'], 'ObjectAdapter')
        self.assertEqual(summary['traverser'], 'DepthFirstPreOrderTraverser')
        self.assertEqual(summary['error_policy'], 'SkipUnreflectablePolicy')


if __name__ == "__main__":
    unittest.main()
