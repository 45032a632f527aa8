""" Mutations: book trips, cancel trips, log in """

from .aggregate import Ok, Fail, Outcome
from .aggregate import aggregate_booking, aggregate_cancellation, aggregate_login
from .aggregate import mutation_response, MutationResponseDict
