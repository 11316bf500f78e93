"""Unit tests for FollowService against the in-memory edge store."""

import unittest
from unittest.mock import patch

from core.exceptions import FollowErrorCode, StoreUnavailableError
from core.pagination import Pagination
from core.services.follow_service import FollowService
from tests.fakes import FakeUserLookup, InMemoryEdgeStore


class FollowServiceTestCase(unittest.TestCase):
    """Shared fixtures: three known users and an empty store."""

    def setUp(self):
        """Set up test fixtures."""
        self.store = InMemoryEdgeStore()
        self.users = FakeUserLookup("alice", "bob", "carol", "dave")
        self.service = FollowService(edge_store=self.store, user_lookup=self.users)

    def strict_service(self):
        """Service with fail-soft disabled."""
        return FollowService(
            edge_store=self.store, user_lookup=self.users, fail_soft=False
        )


class TestFollowUser(FollowServiceTestCase):
    """Tests for FollowService.follow_user."""

    def test_follow_creates_edge(self):
        """Test that a valid follow stores the edge and returns it."""
        result = self.service.follow_user("alice", "bob")

        self.assertTrue(result.success)
        self.assertEqual(result.message, "Successfully followed the user.")
        self.assertEqual(result.data.follower, "alice")
        self.assertEqual(result.data.followee, "bob")
        self.assertIsNone(result.error)
        self.assertFalse(result.degraded)
        self.assertTrue(self.store.exists("alice", "bob"))

    def test_self_follow_is_rejected_without_creating_edge(self):
        """Test that following yourself fails and leaves the store untouched."""
        result = self.service.follow_user("alice", "alice")

        self.assertFalse(result.success)
        self.assertEqual(result.error, FollowErrorCode.SELF_FOLLOW)
        self.assertEqual(result.message, "Users cannot follow themselves")
        self.assertEqual(self.store.edge_count, 0)

    def test_self_follow_is_checked_before_user_existence(self):
        """Test that self-follow wins over an unknown user."""
        result = self.service.follow_user("ghost", "ghost")

        self.assertEqual(result.error, FollowErrorCode.SELF_FOLLOW)

    def test_unknown_follower_is_rejected(self):
        """Test that an unknown follower yields user_not_found."""
        result = self.service.follow_user("ghost", "bob")

        self.assertFalse(result.success)
        self.assertEqual(result.error, FollowErrorCode.USER_NOT_FOUND)
        self.assertIn("Following user 'ghost' not found", result.message)
        self.assertEqual(self.store.edge_count, 0)

    def test_unknown_followee_is_rejected(self):
        """Test that an unknown followee yields user_not_found."""
        result = self.service.follow_user("alice", "ghost")

        self.assertEqual(result.error, FollowErrorCode.USER_NOT_FOUND)
        self.assertIn("User to follow 'ghost' not found", result.message)

    def test_unknown_follower_is_reported_before_unknown_followee(self):
        """Test precondition order when both users are unknown."""
        result = self.service.follow_user("ghost", "phantom")

        self.assertIn("'ghost'", result.message)

    def test_duplicate_follow_is_rejected(self):
        """Test that a second follow of the same pair fails."""
        self.service.follow_user("alice", "bob")

        result = self.service.follow_user("alice", "bob")

        self.assertFalse(result.success)
        self.assertEqual(result.error, FollowErrorCode.ALREADY_FOLLOWING)
        self.assertEqual(self.store.edge_count, 1)

    def test_follow_is_directed(self):
        """Test that alice -> bob does not block bob -> alice."""
        self.service.follow_user("alice", "bob")

        result = self.service.follow_user("bob", "alice")

        self.assertTrue(result.success)
        self.assertEqual(self.store.edge_count, 2)

    def test_refollow_after_unfollow_succeeds(self):
        """Test follow, unfollow, follow again."""
        self.assertTrue(self.service.follow_user("alice", "bob").success)
        self.assertTrue(self.service.unfollow_user("alice", "bob").success)

        result = self.service.follow_user("alice", "bob")

        self.assertTrue(result.success)
        self.assertTrue(self.service.is_following("alice", "bob"))

    def test_constraint_violation_from_concurrent_follow(self):
        """Test that losing an insert race is reported as constraint_violation."""
        self.store.seed("alice", "bob")

        with patch.object(self.store, "exists", return_value=False):
            result = self.service.follow_user("alice", "bob")

        self.assertFalse(result.success)
        self.assertEqual(result.error, FollowErrorCode.CONSTRAINT_VIOLATION)
        self.assertFalse(result.degraded)
        self.assertEqual(self.store.edge_count, 1)

    def test_store_failure_returns_degraded_result(self):
        """Test that a failing insert is reported, not raised, when fail-soft."""
        self.store.fail_on("insert")

        result = self.service.follow_user("alice", "bob")

        self.assertFalse(result.success)
        self.assertEqual(result.error, FollowErrorCode.STORE_UNAVAILABLE)
        self.assertTrue(result.degraded)
        self.assertEqual(self.store.edge_count, 0)

    def test_user_lookup_failure_returns_degraded_result(self):
        """Test that a failing user lookup is treated as a store failure."""
        self.users.unavailable = True

        result = self.service.follow_user("alice", "bob")

        self.assertEqual(result.error, FollowErrorCode.STORE_UNAVAILABLE)
        self.assertTrue(result.degraded)

    def test_store_failure_raises_when_fail_soft_disabled(self):
        """Test that strict mode propagates store failures."""
        self.store.fail_on("insert")

        with self.assertRaises(StoreUnavailableError):
            self.strict_service().follow_user("alice", "bob")

    def test_business_errors_are_results_even_when_fail_soft_disabled(self):
        """Test that strict mode still reports rule violations as results."""
        result = self.strict_service().follow_user("alice", "alice")

        self.assertEqual(result.error, FollowErrorCode.SELF_FOLLOW)


class TestUnfollowAndRemoveFollower(FollowServiceTestCase):
    """Tests for FollowService.unfollow_user and remove_follower."""

    def test_unfollow_removes_edge(self):
        """Test that unfollow followed by is_following returns False."""
        self.store.seed("alice", "bob")

        result = self.service.unfollow_user("alice", "bob")

        self.assertTrue(result.success)
        self.assertTrue(result.data)
        self.assertEqual(result.message, "Successfully unfollowed the user.")
        self.assertFalse(self.service.is_following("alice", "bob"))

    def test_unfollow_missing_edge_fails(self):
        """Test that unfollowing without an edge yields not_following."""
        result = self.service.unfollow_user("alice", "bob")

        self.assertFalse(result.success)
        self.assertFalse(result.data)
        self.assertEqual(result.error, FollowErrorCode.NOT_FOLLOWING)
        self.assertNotIn("delete", self.store.calls)

    def test_unfollow_does_not_require_known_users(self):
        """Test that stale edges of deleted users can still be removed."""
        self.store.seed("ghost", "bob")

        result = self.service.unfollow_user("ghost", "bob")

        self.assertTrue(result.success)

    def test_remove_follower_removes_reverse_edge(self):
        """Test that remove_follower(bob, alice) deletes alice -> bob."""
        self.store.seed("alice", "bob")

        result = self.service.remove_follower("bob", "alice")

        self.assertTrue(result.success)
        self.assertEqual(result.message, "Successfully removed the follower.")
        self.assertFalse(self.store.exists("alice", "bob"))

    def test_remove_follower_matches_unfollow(self):
        """Test that remove_follower and unfollow_user are interchangeable."""
        self.store.seed("alice", "bob")
        self.store.seed("carol", "bob")

        self.service.unfollow_user("alice", "bob")
        self.service.remove_follower("bob", "carol")

        self.assertEqual(self.store.edge_count, 0)
        self.assertEqual(self.service.get_followers("bob").total, 0)

    def test_remove_follower_checks_direction(self):
        """Test that bob -> alice is not removed as one of bob's followers."""
        self.store.seed("bob", "alice")

        result = self.service.remove_follower("bob", "alice")

        self.assertEqual(result.error, FollowErrorCode.NOT_FOLLOWING)
        self.assertTrue(self.store.exists("bob", "alice"))

    def test_delete_failure_returns_degraded_result(self):
        """Test that a failing delete is reported as store_unavailable."""
        self.store.seed("alice", "bob")
        self.store.fail_on("delete")

        result = self.service.unfollow_user("alice", "bob")

        self.assertFalse(result.success)
        self.assertFalse(result.data)
        self.assertEqual(result.error, FollowErrorCode.STORE_UNAVAILABLE)
        self.assertTrue(result.degraded)

    def test_delete_failure_raises_when_fail_soft_disabled(self):
        """Test that strict mode propagates delete failures."""
        self.store.seed("alice", "bob")
        self.store.fail_on("delete")

        with self.assertRaises(StoreUnavailableError):
            self.strict_service().remove_follower("bob", "alice")


class TestIsFollowing(FollowServiceTestCase):
    """Tests for FollowService.is_following."""

    def test_reports_existing_edge(self):
        """Test that an existing edge is reported."""
        self.store.seed("alice", "bob")

        self.assertTrue(self.service.is_following("alice", "bob"))
        self.assertFalse(self.service.is_following("bob", "alice"))

    def test_returns_false_on_store_failure(self):
        """Test that a failing store reads as not following when fail-soft."""
        self.store.seed("alice", "bob")
        self.store.fail_on("exists")

        self.assertFalse(self.service.is_following("alice", "bob"))

    def test_raises_on_store_failure_when_fail_soft_disabled(self):
        """Test that strict mode propagates lookup failures."""
        self.store.fail_on("exists")

        with self.assertRaises(StoreUnavailableError):
            self.strict_service().is_following("alice", "bob")


class TestFollowListings(FollowServiceTestCase):
    """Tests for FollowService.get_followers and get_following."""

    def test_followers_are_most_recent_first(self):
        """Test that followers come back in reverse follow order."""
        for follower in ("alice", "carol", "dave"):
            self.store.seed(follower, "bob")

        page = self.service.get_followers("bob")

        self.assertEqual(page.data, ["dave", "carol", "alice"])
        self.assertEqual(page.total, 3)
        self.assertFalse(page.degraded)

    def test_following_is_most_recent_first(self):
        """Test that followees come back in reverse follow order."""
        self.store.seed("alice", "dave", "carol", "bob")

        page = self.service.get_following("alice")

        self.assertEqual(page.data, ["dave", "carol", "bob"])

    def test_default_pagination(self):
        """Test that omitted pagination means page 1 of 10."""
        page = self.service.get_following("alice")

        self.assertEqual(page.page, 1)
        self.assertEqual(page.limit, 10)

    def test_pages_through_followers(self):
        """Test page metadata for 25 followers at 10 per page."""
        followers = [f"user{i:02d}" for i in range(25)]
        for follower in followers:
            self.store.seed(follower, "bob")

        first = self.service.get_followers("bob", Pagination.clamped(1, 10))
        last = self.service.get_followers("bob", Pagination.clamped(3, 10))

        self.assertEqual(first.total_pages, 3)
        self.assertTrue(first.has_next)
        self.assertFalse(first.has_prev)
        self.assertEqual(first.data[0], "user24")
        self.assertEqual(len(last.data), 5)
        self.assertFalse(last.has_next)
        self.assertTrue(last.has_prev)
        self.assertEqual(last.data[-1], "user00")

    def test_page_past_the_end_is_empty(self):
        """Test that a page beyond the last one returns no rows."""
        self.store.seed("alice", "bob")

        page = self.service.get_following("alice", Pagination.clamped(5, 10))

        self.assertEqual(page.data, [])
        self.assertEqual(page.total, 1)
        self.assertFalse(page.has_next)

    def test_store_failure_returns_degraded_empty_page(self):
        """Test that a failing scan degrades to an empty page."""
        self.store.seed("alice", "bob")
        self.store.fail_on("scan_by_followee")

        page = self.service.get_followers("bob", Pagination.clamped(2, 5))

        self.assertEqual(page.data, [])
        self.assertEqual(page.total, 0)
        self.assertEqual(page.total_pages, 0)
        self.assertEqual(page.page, 2)
        self.assertTrue(page.degraded)

    def test_legitimately_empty_page_is_not_degraded(self):
        """Test that an empty result can be told apart from a failure."""
        page = self.service.get_followers("bob")

        self.assertEqual(page.data, [])
        self.assertFalse(page.degraded)

    def test_store_failure_raises_when_fail_soft_disabled(self):
        """Test that strict mode propagates scan failures."""
        self.store.fail_on("scan_by_follower")

        with self.assertRaises(StoreUnavailableError):
            self.strict_service().get_following("alice")


class TestFollowStats(FollowServiceTestCase):
    """Tests for FollowService.get_follow_stats."""

    def setUp(self):
        """Alice follows bob and carol; dave follows alice."""
        super().setUp()
        self.store.seed("alice", "bob", "carol")
        self.store.seed("dave", "alice")

    def test_counts_both_directions(self):
        """Test that stats count following and followers."""
        stats = self.service.get_follow_stats("alice")

        self.assertEqual(stats.following_count, 2)
        self.assertEqual(stats.followers_count, 1)
        self.assertFalse(stats.degraded)

    def test_repeated_reads_are_identical(self):
        """Test that stats are stable without intervening writes."""
        self.assertEqual(
            self.service.get_follow_stats("alice"),
            self.service.get_follow_stats("alice"),
        )

    def test_concurrent_reads_give_same_counts(self):
        """Test that issuing the counts on a worker pool changes nothing."""
        concurrent = FollowService(
            edge_store=self.store, user_lookup=self.users, concurrent_reads=True
        )

        self.assertEqual(
            concurrent.get_follow_stats("alice"),
            self.service.get_follow_stats("alice"),
        )

    def test_store_failure_returns_degraded_zeros(self):
        """Test that a failing count degrades to zero counts."""
        self.store.fail_on("count_by_followee")

        stats = self.service.get_follow_stats("alice")

        self.assertEqual(stats.following_count, 0)
        self.assertEqual(stats.followers_count, 0)
        self.assertTrue(stats.degraded)

    def test_concurrent_store_failure_returns_degraded_zeros(self):
        """Test that a worker failure is surfaced to the fail-soft policy."""
        self.store.fail_on("count_by_follower")
        concurrent = FollowService(
            edge_store=self.store, user_lookup=self.users, concurrent_reads=True
        )

        self.assertTrue(concurrent.get_follow_stats("alice").degraded)

    def test_store_failure_raises_when_fail_soft_disabled(self):
        """Test that strict mode propagates count failures."""
        self.store.fail_on("count_by_follower")

        with self.assertRaises(StoreUnavailableError):
            self.strict_service().get_follow_stats("alice")


class TestMutualFollows(FollowServiceTestCase):
    """Tests for FollowService.get_mutual_follows."""

    def test_returns_shared_followees_in_first_users_recency_order(self):
        """Test a follows {z, x, y}, b follows {y, z, w}: mutual is [z, y]."""
        self.store.seed("a", "z", "x", "y")
        self.store.seed("b", "y", "z", "w")

        self.assertEqual(self.service.get_mutual_follows("a", "b"), ["z", "y"])

    def test_is_not_about_following_each_other(self):
        """Test that a and b following each other is not a mutual follow."""
        self.store.seed("a", "b")
        self.store.seed("b", "a")

        self.assertEqual(self.service.get_mutual_follows("a", "b"), [])

    def test_store_failure_returns_empty_list(self):
        """Test that a failing store degrades to no mutual follows."""
        self.store.seed("a", "x")
        self.store.seed("b", "x")
        self.store.fail_on("mutual")

        self.assertEqual(self.service.get_mutual_follows("a", "b"), [])

    def test_store_failure_raises_when_fail_soft_disabled(self):
        """Test that strict mode propagates mutual failures."""
        self.store.fail_on("mutual")

        with self.assertRaises(StoreUnavailableError):
            self.strict_service().get_mutual_follows("a", "b")


if __name__ == "__main__":
    unittest.main()
