"""
Boolean operations on postings lists (AND, OR, NOT).
Implements the set algebra behind the ALL, ANY and NONE strategies.
"""

from typing import List

from .postings import PostingsList


class BooleanOperations:
    """Implements boolean operations on postings lists."""

    @staticmethod
    def intersect(list1: PostingsList, list2: PostingsList) -> PostingsList:
        """
        Intersect two postings lists (AND operation).
        Uses two-pointer algorithm for O(n + m) complexity.

        Args:
            list1: First postings list
            list2: Second postings list

        Returns:
            New PostingsList containing positions in both lists
        """
        result = PostingsList()

        if not list1.positions or not list2.positions:
            return result

        i, j = 0, 0

        while i < len(list1.positions) and j < len(list2.positions):
            pos1 = list1.positions[i]
            pos2 = list2.positions[j]

            if pos1 == pos2:
                result.positions.append(pos1)
                i += 1
                j += 1
            elif pos1 < pos2:
                i += 1
            else:
                j += 1

        return result

    @staticmethod
    def intersect_many(postings_lists: List[PostingsList]) -> PostingsList:
        """
        Intersect multiple postings lists.
        Folds pairwise intersections left to right, in query term order.

        Args:
            postings_lists: List of PostingsList objects

        Returns:
            PostingsList containing positions in all lists
        """
        if not postings_lists:
            return PostingsList()

        result = postings_lists[0]

        for pl in postings_lists[1:]:
            result = BooleanOperations.intersect(result, pl)

            # Early termination if result becomes empty
            if len(result) == 0:
                break

        return result

    @staticmethod
    def union(list1: PostingsList, list2: PostingsList) -> PostingsList:
        """
        Union two postings lists (OR operation).
        Uses two-pointer merge algorithm for O(n + m) complexity.

        Args:
            list1: First postings list
            list2: Second postings list

        Returns:
            New PostingsList containing positions in either list
        """
        result = PostingsList()

        i, j = 0, 0

        while i < len(list1.positions) and j < len(list2.positions):
            pos1 = list1.positions[i]
            pos2 = list2.positions[j]

            if pos1 < pos2:
                result.positions.append(pos1)
                i += 1
            elif pos1 > pos2:
                result.positions.append(pos2)
                j += 1
            else:
                result.positions.append(pos1)
                i += 1
                j += 1

        result.positions.extend(list1.positions[i:])
        result.positions.extend(list2.positions[j:])

        return result

    @staticmethod
    def union_many(postings_lists: List[PostingsList]) -> PostingsList:
        """
        Union multiple postings lists.

        Args:
            postings_lists: List of PostingsList objects

        Returns:
            PostingsList containing positions in any list
        """
        result = PostingsList()

        for pl in postings_lists:
            result = BooleanOperations.union(result, pl)

        return result

    @staticmethod
    def negate(postings_list: PostingsList, num_lines: int) -> PostingsList:
        """
        Negate a postings list (NOT operation).
        Returns positions in [0, num_lines) NOT in the postings list.

        Args:
            postings_list: PostingsList to negate
            num_lines: Size of the corpus

        Returns:
            PostingsList containing positions not in input list
        """
        excluded = postings_list.get_position_set()
        result = PostingsList()
        result.positions = [pos for pos in range(num_lines) if pos not in excluded]
        return result
