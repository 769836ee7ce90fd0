
## Tables of Hebrew years and how often each year type (keviyah) occurs

import logging

import matplotlib.pyplot as plt
import numpy as np

from HebrewYear import classify_year, is_leap_year, month_lengths, tishrei1_day_number, year_of_cycle

logger = logging.getLogger(__name__)

# days of the week numbered Sunday = 1 ... Saturday = 7
KEVIYAH_DTYPE = np.dtype([('rosh_hashanah', 'i1'), ('year_type', 'U1'), ('pesach', 'i1')])

YEAR_DTYPE = np.dtype([('year', 'i8'), ('day_num', 'i8'), ('weekday', 'i1'), ('leap', '?'),
                       ('year_of_cycle', 'i1'), ('year_type', 'U1'), ('length', 'i2')])

# the fourteen possible year types: (day of Rosh Hashanah, deficient/regular/complete, day of Pesach)
COMMON_KEVIYOT = {(2, 'd', 3), (2, 'c', 5), (3, 'r', 5), (5, 'r', 7), (5, 'c', 1), (7, 'd', 1), (7, 'c', 3)}
LEAP_KEVIYOT = {(2, 'd', 5), (2, 'c', 7), (3, 'r', 7), (5, 'd', 1), (5, 'c', 3), (7, 'd', 3), (7, 'c', 5)}

# months Tishrei through Adar (II) precede Nisan
MONTHS_BEFORE_NISAN = 7


# day number -> day of week with Sunday = 1 ... Saturday = 7
def _day_of_week(day_num):
    return day_num % 7 or 7


# Returns tuple indicating day of Rosh Hashanah, whether year is complete/regular/deficient, and first day of Pesach
def hebrew_year_type(year):

    ny_day_num = tishrei1_day_number(year)
    lengths = month_lengths(year)

    # 15 Nisan
    pesach_day_num = ny_day_num + sum(lengths[:MONTHS_BEFORE_NISAN]) + 14

    return _day_of_week(ny_day_num), classify_year(sum(lengths)), _day_of_week(pesach_day_num)


# Returns an array with one record per Hebrew year: the year number, the day number and day-of-the-week
# of its first day, whether it's a leap year, its year of the 19-year cycle, its year type and its length
def year_lists(start_year=1, total_yrs=6000):

    hebrew_years = []

    ny_day_num = tishrei1_day_number(start_year)

    for year in range(start_year, start_year + total_yrs):

        # first day of next year determines this year's length
        next_ny_day_num = tishrei1_day_number(year + 1)
        len_hebrew_yr = next_ny_day_num - ny_day_num

        hebrew_years.append((year, ny_day_num, _day_of_week(ny_day_num), is_leap_year(year), year_of_cycle(year),
                             classify_year(len_hebrew_yr), len_hebrew_yr))

        ny_day_num = next_ny_day_num

    return np.array(hebrew_years, dtype=YEAR_DTYPE)


# Returns dictionary containing each year type (tuple) as keys and their fraction of total time as data
def yr_type_incidence(start_year=1, total_yrs=19000):

    year_types = np.empty(total_yrs, dtype=KEVIYAH_DTYPE)

    for i in range(total_yrs):
        year_types[i] = hebrew_year_type(start_year + i)

        if i and i % 1000 == 0:
            logger.debug("classified %d of %d years", i, total_yrs)

    # tally of years with each keviyah
    keviyot, tallies = np.unique(year_types, return_counts=True)

    # convert tally of years into fraction of total years
    fractions = tallies / total_yrs

    return {(int(k['rosh_hashanah']), str(k['year_type']), int(k['pesach'])): float(f)
            for k, f in zip(keviyot, fractions)}


# Bar chart of yr_type_incidence; returns the figure
def plot_yr_type_incidence(start_year=1, total_yrs=19000, show=True):

    incidence = yr_type_incidence(start_year, total_yrs)
    year_types = sorted(incidence)

    fig, ax = plt.subplots()
    ax.bar([str(r) + t + str(p) for r, t, p in year_types], [incidence[k] for k in year_types])
    ax.set_xlabel('year type (day of Rosh Hashanah, d/r/c, day of Pesach)')
    ax.set_ylabel('fraction of years')
    ax.set_title('Hebrew years ' + str(start_year) + '-' + str(start_year + total_yrs - 1))

    if show:
        plt.show()

    return fig
